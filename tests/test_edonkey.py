import pytest

from multidigest.edonkey import ED2KHash, ed2k
from multidigest.md4 import md4


def test_empty_is_md4_of_empty():
    assert ed2k(b"").hex() == "31d6cfe0d16ae931b73c59d7e0c089c0"


def test_small_data_equals_md4():
    assert ed2k(b"abc").hex() == "a448017aaf21d8525fc10ae87aa6729d"


def test_single_partial_chunk_equals_md4():
    data = bytes(range(256)) * 10
    assert ed2k(data) == md4(data)


def test_partial_second_chunk_uses_root_hash():
    data = bytes(range(100))
    hasher = ED2KHash(data, chunk_size=64)
    assert hasher.chunks == 1
    assert hasher.digest() == md4(md4(data[:64]) + md4(data[64:]))


def test_exact_multiple_appends_empty_chunk_digest():
    data = bytes(range(128))
    hasher = ED2KHash(data, chunk_size=64)
    assert hasher.chunks == 2
    expected = md4(md4(data[:64]) + md4(data[64:]) + md4(b""))
    assert hasher.digest() == expected


def test_exactly_one_chunk():
    data = bytes(range(64))
    assert ED2KHash(data, chunk_size=64).digest() == md4(md4(data) + md4(b""))


@pytest.mark.parametrize("piece", [1, 3, 17, 64, 65, 150])
def test_streaming_equals_one_shot(piece):
    data = bytes(range(256)) + bytes(range(44))
    hasher = ED2KHash(chunk_size=64)
    for start in range(0, len(data), piece):
        hasher.update(data[start:start + piece])
    assert hasher.digest() == ED2KHash(data, chunk_size=64).digest()


def test_digest_is_repeatable_and_non_destructive():
    hasher = ED2KHash(bytes(range(100)), chunk_size=32)
    first = hasher.digest()
    assert hasher.digest() == first
    hasher.update(b"more")
    assert hasher.digest() == ED2KHash(bytes(range(100)) + b"more", chunk_size=32).digest()


def test_hexdigest_matches_digest():
    hasher = ED2KHash(b"message digest")
    assert hasher.hexdigest() == "d9130a8164549fe818874806e1c7014b"


def test_invalid_chunk_size():
    with pytest.raises(ValueError):
        ED2KHash(chunk_size=0)


def test_rejects_text():
    with pytest.raises(TypeError):
        ED2KHash().update("abc")