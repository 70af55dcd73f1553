"""SHA-1 message digest (FIPS 180) with a hashlib-like interface."""

from __future__ import annotations

import struct
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

DIGEST_SIZE = 20
BLOCK_SIZE = 64

_MASK = 0xFFFFFFFF
_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)


def _rotl(value: int, bits: int) -> int:
    return ((value << bits) | (value >> (32 - bits))) & _MASK


def _choose(b: int, c: int, d: int) -> int:
    return (b & (c ^ d)) ^ d


def _parity(b: int, c: int, d: int) -> int:
    return b ^ c ^ d


def _majority(b: int, c: int, d: int) -> int:
    return ((b | c) & d) | (b & c)


# (function, additive constant) for each group of twenty steps
_STAGES = (
    (_choose, 0x5A827999),
    (_parity, 0x6ED9EBA1),
    (_majority, 0x8F1BBCDC),
    (_parity, 0xCA62C1D6),
)


def _compress(state: tuple[int, ...], block: BytesLike) -> tuple[int, ...]:
    """Process one 64-byte block and return the new chaining state."""
    schedule = list(struct.unpack(">16I", block))
    for t in range(16, 80):
        schedule.append(
            _rotl(schedule[t - 3] ^ schedule[t - 8] ^ schedule[t - 14] ^ schedule[t - 16], 1)
        )
    a, b, c, d, e = state
    for t, word in enumerate(schedule):
        func, constant = _STAGES[t // 20]
        temp = (_rotl(a, 5) + func(b, c, d) + e + constant + word) & _MASK
        a, b, c, d, e = temp, a, _rotl(b, 30), c, d
    return tuple(
        (old + new) & _MASK for old, new in zip(state, (a, b, c, d, e))
    )


class SHA1:
    """Incremental SHA-1 hasher."""

    name = "sha1"
    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def __init__(self, data: BytesLike = b"") -> None:
        self._state = _INITIAL_STATE
        self._buffer = bytearray()
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: BytesLike) -> None:
        """Feed more bytes into the hash; the caller's data is left untouched."""
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

    def copy(self) -> "SHA1":
        """Return an independent hasher with the same internal state."""
        clone = SHA1.__new__(SHA1)
        clone._state = self._state
        clone._buffer = bytearray(self._buffer)
        clone._length = self._length
        return clone

    def digest(self) -> bytes:
        """Return the 20-byte digest of everything fed so far."""
        bit_length = (self._length * 8) & 0xFFFFFFFFFFFFFFFF
        tail = bytes(self._buffer) + b"\x80"
        tail += b"\x00" * ((56 - len(tail)) % BLOCK_SIZE)
        tail += struct.pack(">Q", bit_length)
        state = self._state
        for start in range(0, len(tail), BLOCK_SIZE):
            state = _compress(state, tail[start:start + BLOCK_SIZE])
        return struct.pack(">5I", *state)

    def hexdigest(self) -> str:
        """Return the digest as lower-case hexadecimal."""
        return self.digest().hex()


def sha1(data: BytesLike) -> bytes:
    """Return the SHA-1 digest of ``data``."""
    return SHA1(data).digest()