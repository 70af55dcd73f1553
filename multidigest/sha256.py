"""SHA-256 message digest (FIPS 180-2) with a hashlib-like interface."""

from __future__ import annotations

import struct
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

DIGEST_SIZE = 32
BLOCK_SIZE = 64

_MASK = 0xFFFFFFFF
_INITIAL_STATE = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B,
    0x59F111F1, 0x923F82A4, 0xAB1C5ED5, 0xD807AA98, 0x12835B01,
    0x243185BE, 0x550C7DC3, 0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7,
    0xC19BF174, 0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC,
    0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA, 0x983E5152,
    0xA831C66D, 0xB00327C8, 0xBF597FC7, 0xC6E00BF3, 0xD5A79147,
    0x06CA6351, 0x14292967, 0x27B70A85, 0x2E1B2138, 0x4D2C6DFC,
    0x53380D13, 0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3, 0xD192E819,
    0xD6990624, 0xF40E3585, 0x106AA070, 0x19A4C116, 0x1E376C08,
    0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F,
    0x682E6FF3, 0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)


def _rotr(value: int, bits: int) -> int:
    return ((value >> bits) | (value << (32 - bits))) & _MASK


def _compress(state: tuple[int, ...], block: BytesLike) -> tuple[int, ...]:
    """Process one 64-byte block and return the new chaining state."""
    w = list(struct.unpack(">16I", block))
    for t in range(16, 64):
        x15 = w[t - 15]
        x2 = w[t - 2]
        gamma0 = _rotr(x15, 7) ^ _rotr(x15, 18) ^ (x15 >> 3)
        gamma1 = _rotr(x2, 17) ^ _rotr(x2, 19) ^ (x2 >> 10)
        w.append((gamma1 + w[t - 7] + gamma0 + w[t - 16]) & _MASK)

    a, b, c, d, e, f, g, h = state
    for word, constant in zip(w, _K):
        sigma1 = _rotr(e, 6) ^ _rotr(e, 11) ^ _rotr(e, 25)
        choose = g ^ (e & (f ^ g))
        t0 = (h + sigma1 + choose + constant + word) & _MASK
        sigma0 = _rotr(a, 2) ^ _rotr(a, 13) ^ _rotr(a, 22)
        majority = ((a | b) & c) | (a & b)
        t1 = (sigma0 + majority) & _MASK
        a, b, c, d, e, f, g, h = (t0 + t1) & _MASK, a, b, c, (d + t0) & _MASK, e, f, g
    return tuple(
        (old + new) & _MASK for old, new in zip(state, (a, b, c, d, e, f, g, h))
    )


class SHA256:
    """Incremental SHA-256 hasher."""

    name = "sha256"
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

    def copy(self) -> "SHA256":
        """Return an independent hasher with the same internal state."""
        clone = SHA256.__new__(SHA256)
        clone._state = self._state
        clone._buffer = bytearray(self._buffer)
        clone._length = self._length
        return clone

    def digest(self) -> bytes:
        """Return the 32-byte digest of everything fed so far."""
        bit_length = (self._length * 8) & 0xFFFFFFFFFFFFFFFF
        tail = bytes(self._buffer) + b"\x80"
        tail += b"\x00" * ((56 - len(tail)) % BLOCK_SIZE)
        tail += struct.pack(">Q", bit_length)
        state = self._state
        for start in range(0, len(tail), BLOCK_SIZE):
            state = _compress(state, tail[start:start + BLOCK_SIZE])
        return struct.pack(">8I", *state)

    def hexdigest(self) -> str:
        """Return the digest as lower-case hexadecimal."""
        return self.digest().hex()


def sha256(data: BytesLike) -> bytes:
    """Return the SHA-256 digest of ``data``."""
    return SHA256(data).digest()