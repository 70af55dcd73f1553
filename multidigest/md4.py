"""MD4 message digest (RFC 1320) and a matching HMAC construction."""

from __future__ import annotations

import os
import struct
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

DIGEST_SIZE = 16
BLOCK_SIZE = 64

_MASK = 0xFFFFFFFF
_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_ROUND1_ORDER = tuple(range(16))
_ROUND2_ORDER = (0, 4, 8, 12, 1, 5, 9, 13, 2, 6, 10, 14, 3, 7, 11, 15)
_ROUND3_ORDER = (0, 8, 4, 12, 2, 10, 6, 14, 1, 9, 5, 13, 3, 11, 7, 15)

_ROUND1_SHIFTS = (3, 7, 11, 19)
_ROUND2_SHIFTS = (3, 5, 9, 13)
_ROUND3_SHIFTS = (3, 9, 11, 15)

_READ_SIZE = 64 * 1024


def _rotl(value: int, bits: int) -> int:
    value &= _MASK
    return ((value << bits) | (value >> (32 - bits))) & _MASK


def _f(x: int, y: int, z: int) -> int:
    return (x & y) | (~x & z)


def _g(x: int, y: int, z: int) -> int:
    return (x & y) | (x & z) | (y & z)


def _h(x: int, y: int, z: int) -> int:
    return x ^ y ^ z


_ROUNDS = (
    (_f, 0, _ROUND1_ORDER, _ROUND1_SHIFTS),
    (_g, 0x5A827999, _ROUND2_ORDER, _ROUND2_SHIFTS),
    (_h, 0x6ED9EBA1, _ROUND3_ORDER, _ROUND3_SHIFTS),
)


def _compress(state: tuple[int, int, int, int], block: BytesLike) -> tuple[int, int, int, int]:
    """Process one 64-byte block and return the new chaining state."""
    words = struct.unpack("<16I", block)
    a, b, c, d = state
    for func, constant, order, shifts in _ROUNDS:
        for step, index in enumerate(order):
            t = _rotl(a + func(b, c, d) + words[index] + constant, shifts[step % 4])
            a, b, c, d = d, t, b, c
    return (
        (state[0] + a) & _MASK,
        (state[1] + b) & _MASK,
        (state[2] + c) & _MASK,
        (state[3] + d) & _MASK,
    )


class MD4:
    """Incremental MD4 hasher with a hashlib-like interface."""

    name = "md4"
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

    def copy(self) -> "MD4":
        """Return an independent hasher with the same internal state."""
        clone = MD4.__new__(MD4)
        clone._state = self._state
        clone._buffer = bytearray(self._buffer)
        clone._length = self._length
        return clone

    def digest(self) -> bytes:
        """Return the 16-byte digest of everything fed so far."""
        bit_length = (self._length * 8) & 0xFFFFFFFFFFFFFFFF
        used = self._length % BLOCK_SIZE
        pad_len = (56 - used) if used < 56 else (120 - used)
        tail = bytes(self._buffer) + b"\x80" + b"\x00" * (pad_len - 1)
        tail += struct.pack("<Q", bit_length)
        state = self._state
        for start in range(0, len(tail), BLOCK_SIZE):
            state = _compress(state, tail[start:start + BLOCK_SIZE])
        return struct.pack("<4I", *state)

    def hexdigest(self) -> str:
        """Return the digest as lower-case hexadecimal."""
        return self.digest().hex()


class HMACMD4:
    """HMAC over MD4; keys longer than one block are truncated to 64 bytes."""

    name = "hmac-md4"
    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def __init__(self, key: BytesLike, data: BytesLike = b"") -> None:
        key_bytes = bytes(memoryview(key).cast("B"))[:BLOCK_SIZE].ljust(BLOCK_SIZE, b"\x00")
        self._opad = bytes(k ^ 0x5C for k in key_bytes)
        ipad = bytes(k ^ 0x36 for k in key_bytes)
        self._inner = MD4(ipad)
        if data:
            self.update(data)

    def update(self, data: BytesLike) -> None:
        """Feed more message bytes."""
        self._inner.update(data)

    def digest(self) -> bytes:
        """Return the 16-byte authentication code."""
        outer = MD4(self._opad)
        outer.update(self._inner.digest())
        return outer.digest()

    def hexdigest(self) -> str:
        """Return the authentication code as lower-case hexadecimal."""
        return self.digest().hex()


def md4(data: BytesLike) -> bytes:
    """Return the MD4 digest of ``data``."""
    return MD4(data).digest()


def md4_file(path: Union[str, os.PathLike]) -> bytes:
    """Return the MD4 digest of a file's contents; raises OSError on failure."""
    hasher = MD4()
    with open(path, "rb") as handle:
        for chunk in iter(lambda: handle.read(_READ_SIZE), b""):
            hasher.update(chunk)
    return hasher.digest()


def hmac_md4(key: BytesLike, data: BytesLike) -> bytes:
    """Return HMAC-MD4 of ``data`` under ``key``."""
    return HMACMD4(key, data).digest()