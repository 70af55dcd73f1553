"""eDonkey2000 (ed2k) hash: an MD4 root over per-chunk MD4 digests."""

from __future__ import annotations

from typing import Union

from .md4 import DIGEST_SIZE, MD4

BytesLike = Union[bytes, bytearray, memoryview]

CHUNK_SIZE = 9728000


class ED2KHash:
    """Incremental ed2k hasher.

    Data is split into chunks of ``chunk_size`` bytes, each hashed with MD4.
    If any full chunk was seen, the result is the MD4 of the concatenated
    chunk digests, including the digest of the trailing (possibly empty)
    chunk; otherwise it is the plain MD4 of the data.
    """

    name = "ed2k"
    digest_size = DIGEST_SIZE

    def __init__(self, data: BytesLike = b"", *, chunk_size: int = CHUNK_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self._chunk_size = chunk_size
        self._current = MD4()
        self._root = MD4()
        self._in_chunk = 0
        self._chunks = 0
        if data:
            self.update(data)

    @property
    def chunks(self) -> int:
        """Number of complete chunks processed so far."""
        return self._chunks

    def update(self, data: BytesLike) -> None:
        """Feed more bytes into the hash."""
        view = memoryview(data).cast("B")
        while view:
            take = min(len(view), self._chunk_size - self._in_chunk)
            self._current.update(view[:take])
            self._in_chunk += take
            view = view[take:]
            if self._in_chunk == self._chunk_size:
                self._root.update(self._current.digest())
                self._current = MD4()
                self._in_chunk = 0
                self._chunks += 1

    def digest(self) -> bytes:
        """Return the 16-byte ed2k digest of everything fed so far."""
        if self._chunks == 0:
            return self._current.digest()
        root = self._root.copy()
        root.update(self._current.digest())
        return root.digest()

    def hexdigest(self) -> str:
        """Return the digest as lower-case hexadecimal."""
        return self.digest().hex()


def ed2k(data: BytesLike) -> bytes:
    """Return the ed2k digest of ``data``."""
    return ED2KHash(data).digest()