"""MD5 message digest (RFC 1321) with a hashlib-like interface."""

from __future__ import annotations

import struct
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

DIGEST_SIZE = 16
BLOCK_SIZE = 64

_MASK = 0xFFFFFFFF
_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_CONSTANTS = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE,
    0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
    0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA,
    0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED,
    0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
    0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05,
    0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039,
    0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
    0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)


def _f(x: int, y: int, z: int) -> int:
    return z ^ (x & (y ^ z))


def _g(x: int, y: int, z: int) -> int:
    return y ^ (z & (x ^ y))


def _h(x: int, y: int, z: int) -> int:
    return x ^ y ^ z


def _i(x: int, y: int, z: int) -> int:
    return y ^ ((x | (~z & _MASK)) & _MASK)


# (function, message word order, rotation amounts) for each of the four rounds
_ROUNDS = (
    (_f, tuple(range(16)), (7, 12, 17, 22)),
    (_g, tuple((1 + 5 * k) % 16 for k in range(16)), (5, 9, 14, 20)),
    (_h, tuple((5 + 3 * k) % 16 for k in range(16)), (4, 11, 16, 23)),
    (_i, tuple((7 * k) % 16 for k in range(16)), (6, 10, 15, 21)),
)

_SCHEDULE = tuple(
    (func, index, shifts[step % 4])
    for func, order, shifts in _ROUNDS
    for step, index in enumerate(order)
)


def _rotl(value: int, bits: int) -> int:
    value &= _MASK
    return ((value << bits) | (value >> (32 - bits))) & _MASK


def _compress(state: tuple[int, int, int, int], block: BytesLike) -> tuple[int, int, int, int]:
    """Process one 64-byte block and return the new chaining state."""
    words = struct.unpack("<16I", block)
    a, b, c, d = state
    for (func, index, shift), constant in zip(_SCHEDULE, _CONSTANTS):
        rotated = _rotl(a + func(b, c, d) + words[index] + constant, shift)
        a, b, c, d = d, (b + rotated) & _MASK, b, c
    return (
        (state[0] + a) & _MASK,
        (state[1] + b) & _MASK,
        (state[2] + c) & _MASK,
        (state[3] + d) & _MASK,
    )


class MD5:
    """Incremental MD5 hasher."""

    name = "md5"
    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def __init__(self, data: BytesLike = b"") -> None:
        self._state = _INITIAL_STATE
        self._buffer = bytearray()
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: BytesLike) -> None:
        """Feed more bytes into the hash."""
        view = memoryview(data).cast("B")
        self._length += len(view)
        offset = 0
        if self._buffer:
            needed = BLOCK_SIZE - len(self._buffer)
            self._buffer += view[:needed]
            offset = needed
            if len(self._buffer) < BLOCK_SIZE:
                return
            self._state = _compress(self._state, self._buffer)
            self._buffer.clear()
        end = offset + (len(view) - offset) // BLOCK_SIZE * BLOCK_SIZE
        for start in range(offset, end, BLOCK_SIZE):
            self._state = _compress(self._state, view[start:start + BLOCK_SIZE])
        self._buffer += view[end:]

    def copy(self) -> "MD5":
        """Return an independent hasher with the same internal state."""
        clone = MD5.__new__(MD5)
        clone._state = self._state
        clone._buffer = bytearray(self._buffer)
        clone._length = self._length
        return clone

    def digest(self) -> bytes:
        """Return the 16-byte digest of everything fed so far."""
        bit_length = (self._length * 8) & 0xFFFFFFFFFFFFFFFF
        tail = bytes(self._buffer) + b"\x80"
        tail += b"\x00" * ((56 - len(tail)) % BLOCK_SIZE)
        tail += struct.pack("<Q", bit_length)
        state = self._state
        for start in range(0, len(tail), BLOCK_SIZE):
            state = _compress(state, tail[start:start + BLOCK_SIZE])
        return struct.pack("<4I", *state)

    def hexdigest(self) -> str:
        """Return the digest as lower-case hexadecimal."""
        return self.digest().hex()


def md5(data: BytesLike) -> bytes:
    """Return the MD5 digest of ``data``."""
    return MD5(data).digest()