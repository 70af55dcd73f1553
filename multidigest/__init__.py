"""Pure-Python CRC-32, MD4, HMAC-MD4, MD5, eDonkey, SHA-1 and SHA-256 digests,
with progress reporting and command-line option parsing helpers."""

__version__ = "0.1.0"