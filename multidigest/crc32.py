"""CRC-32 as used by zip (polynomial 0x04C11DB7, reflected)."""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

INITIAL = 0xFFFFFFFF
_MASK = 0xFFFFFFFF
_POLYNOMIAL = 0xEDB88320


def _build_table() -> tuple[int, ...]:
    table = []
    for byte in range(256):
        value = byte
        for _ in range(8):
            value = (value >> 1) ^ _POLYNOMIAL if value & 1 else value >> 1
        table.append(value)
    return tuple(table)


_TABLE = _build_table()


def crc_update(crc: int, data: BytesLike) -> int:
    """Return ``crc`` updated with ``data``, without any pre- or post-inversion.

    Start from ``INITIAL`` and invert the final value to obtain the standard CRC.
    """
    if not 0 <= crc <= _MASK:
        raise ValueError("crc must be an unsigned 32-bit value")
    table = _TABLE
    for byte in memoryview(data).cast("B"):
        crc = table[(byte ^ crc) & 0xFF] ^ (crc >> 8)
    return crc


def crc32(data: BytesLike) -> int:
    """Return the standard CRC-32 of ``data``."""
    return crc_update(INITIAL, data) ^ _MASK