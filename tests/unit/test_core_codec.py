import pytest

from smallnum.core.number import BigInt
from smallnum.core.codec import (
    from_bytes,
    from_hex,
    from_int,
    to_bytes,
    to_hex,
    to_int,
    write_bytes,
)
from smallnum.core.exc import BufferSizeError, LimbDomainError, ReleasedNumberError


# -----------------------------
# Encoding (big-endian bytes)
# -----------------------------


@pytest.mark.parametrize(
    "words,expected",
    [
        ([0], b"\x00\x00\x00\x00"),
        ([0x01020304], b"\x01\x02\x03\x04"),
        ([0x00000000, 0x00000001], b"\x00\x00\x00\x01\x00\x00\x00\x00"),
        ([0xDDCCBBAA, 0x44332211], b"\x44\x33\x22\x11\xDD\xCC\xBB\xAA"),
    ],
)
def test_to_bytes_big_endian_whole_limbs(words, expected):
    x = BigInt(words)
    print(f"[to_bytes] {x} -> expect {expected.hex()}")
    assert to_bytes(x) == expected
    assert len(to_bytes(x)) == x.num_bytes()


def test_to_bytes_drops_sign():
    assert to_bytes(BigInt([7], True)) == b"\x00\x00\x00\x07"


def test_write_bytes_into_caller_buffer():
    x = BigInt([0xCAFEBABE, 0x1])
    buf = bytearray(b"\xff" * 10)
    n = write_bytes(x, buf)
    assert n == 8
    assert bytes(buf[:8]) == b"\x00\x00\x00\x01\xCA\xFE\xBA\xBE"
    assert bytes(buf[8:]) == b"\xff\xff"
    view = memoryview(bytearray(8))
    assert write_bytes(x, view) == 8
    assert view.tobytes() == bytes(buf[:8])


def test_write_bytes_short_buffer_rejected():
    with pytest.raises(BufferSizeError) as exc:
        write_bytes(BigInt([1, 1]), bytearray(7))
    assert exc.value.required == 8
    assert exc.value.available == 7


# -----------------------------
# Decoding
# -----------------------------


@pytest.mark.parametrize(
    "data,expected",
    [
        (b"\x01", [0x00000001]),
        (b"\x01\x02\x03", [0x00010203]),
        (b"\x01\x02\x03\x04", [0x01020304]),
        (b"\x05\x01\x02\x03\x04", [0x01020304, 0x00000005]),
        (b"\x01\x02\x03\x04\x05\x06\x07\x08\x09", [0x06070809, 0x02030405, 0x00000001]),
        (b"\x00\x00\x00\x00\x00\x00\x00\x07", [7]),
        (b"\x00", [0]),
    ],
)
def test_from_bytes_groups_from_the_end(data, expected, canonical):
    x = from_bytes(data)
    canonical(x)
    assert x.limbs == expected
    assert x.negative is False


@pytest.mark.parametrize("length,nlimbs", [(1, 1), (4, 1), (5, 2), (8, 2), (9, 3)])
def test_from_bytes_limb_count(length, nlimbs):
    data = b"\xff" * length
    assert from_bytes(data).length == nlimbs


def test_from_bytes_explicit_length_prefix():
    data = b"\x00\x00\x01\x00\xAA\xBB"
    x = from_bytes(data, 4)
    assert x.limbs == [0x100]


def test_from_bytes_overwrites_result_in_place():
    res = BigInt([1, 2, 3], True)
    buf = res.limbs
    out = from_bytes(b"\x12\x34", result=res)
    assert out is res
    assert res.limbs is buf
    assert res.limbs == [0x1234]
    assert res.negative is False


@pytest.mark.parametrize(
    "call,name",
    [
        (lambda: from_bytes(b""), "empty"),
        (lambda: from_bytes(b"\x01", 0), "length 0"),
        (lambda: from_bytes(b"\x01", 2), "length past end"),
        (lambda: from_bytes("01"), "str source"),
        (lambda: from_bytes(b"\x01", result=5), "bad result"),
    ],
)
def test_from_bytes_rejects_bad_input(call, name):
    print(f"[from_bytes-invalid] {name} -> expect LimbDomainError")
    with pytest.raises(LimbDomainError):
        call()


def test_from_bytes_into_freed_result_raises():
    res = BigInt()
    res.free()
    with pytest.raises(ReleasedNumberError):
        from_bytes(b"\x01", result=res)


def test_bytes_round_trip(int_samples):
    for v in int_samples:
        x = from_int(abs(v))
        data = to_bytes(x)
        assert from_bytes(data, len(data)) == x
        assert to_int(from_bytes(data)) == abs(v)


# -----------------------------
# Hex and int bridges
# -----------------------------


@pytest.mark.parametrize(
    "text,value",
    [
        ("0", 0),
        ("0x0", 0),
        ("ff", 0xFF),
        ("0XFFFFFFFF", 0xFFFFFFFF),
        ("100000000", 1 << 32),
        ("-0x1FEFEFEFD01010102", -0x1FEFEFEFD01010102),
        ("  00000000000000000000abc  ", 0xABC),
        ("-0", 0),
    ],
)
def test_from_hex(text, value, canonical):
    x = from_hex(text)
    canonical(x)
    assert to_int(x) == value


@pytest.mark.parametrize("text", ["", "0x", "-", "12g4", "1 2", "+5"])
def test_from_hex_rejects_invalid(text):
    with pytest.raises(LimbDomainError):
        from_hex(text)


def test_to_hex_formatting():
    assert to_hex(BigInt()) == "0"
    assert to_hex(BigInt([0, 1])) == "100000000"
    assert to_hex(BigInt([0xAB, 0xC], True)) == "-C000000AB"
    z = BigInt()
    z.set_negative(True)
    assert to_hex(z) == "0"


def test_hex_and_int_round_trip(int_samples):
    for v in int_samples:
        x = from_int(v)
        assert to_int(x) == v
        assert to_int(from_hex(to_hex(x))) == v
        assert to_hex(x) == format(v, "X")


@pytest.mark.parametrize("bad", [1.0, "1", True, None])
def test_from_int_rejects_non_int(bad):
    with pytest.raises(LimbDomainError):
        from_int(bad)


@pytest.mark.parametrize(
    "dst,name",
    [
        (bytes(8), "bytes"),
        (memoryview(bytes(8)), "read-only memoryview"),
        ([0] * 8, "list"),
    ],
)
def test_write_bytes_rejects_non_writable_buffer(dst, name):
    print(f"[write_bytes-readonly] {name} -> expect LimbDomainError")
    with pytest.raises(LimbDomainError):
        write_bytes(BigInt([1]), dst)


@pytest.mark.parametrize("length", [2.0, "2", True])
def test_from_bytes_rejects_non_int_length(length):
    with pytest.raises(LimbDomainError):
        from_bytes(b"\x01\x02", length)
