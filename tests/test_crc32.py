import zlib

import pytest

from multidigest.crc32 import INITIAL, crc32, crc_update


def test_check_value():
    assert crc32(b"123456789") == 0xCBF43926


def test_table_entries_from_zero_state():
    assert crc_update(0, b"\x01") == 0x77073096
    assert crc_update(0, b"\xff") == 0x2D02EF8D


def test_empty_is_zero():
    assert crc32(b"") == 0


def test_empty_update_keeps_state():
    assert crc_update(0x12345678, b"") == 0x12345678


@pytest.mark.parametrize(
    "data",
    [b"a", b"abc", b"hello world", bytes(range(256)), b"\x00" * 1000],
)
def test_matches_reference(data):
    assert crc32(data) == zlib.crc32(data)


def test_incremental_equals_one_shot():
    data = bytes(range(256)) * 4
    crc = INITIAL
    for start in range(0, len(data), 37):
        crc = crc_update(crc, data[start:start + 37])
    assert crc ^ 0xFFFFFFFF == crc32(data)


def test_result_fits_32_bits():
    for data in (b"x", b"yz" * 50, bytes(range(200))):
        assert 0 <= crc32(data) <= 0xFFFFFFFF


def test_accepts_bytearray_and_memoryview():
    data = b"some payload"
    assert crc32(bytearray(data)) == crc32(memoryview(data)) == zlib.crc32(data)


@pytest.mark.parametrize("bad", [-1, 0x100000000])
def test_rejects_out_of_range_crc(bad):
    with pytest.raises(ValueError):
        crc_update(bad, b"data")