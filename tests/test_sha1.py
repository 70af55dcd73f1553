import hashlib

import pytest

from multidigest.sha1 import SHA1, sha1


def test_empty_input_digest():
    assert SHA1().hexdigest() == "da39a3ee5e6b4b0d3255bfef95601890afd80709"


def test_abc_digest():
    assert sha1(b"abc").hex() == "a9993e364706816aba3e25717850c26c9cd0d89d"


@pytest.mark.parametrize("length", [0, 1, 55, 56, 57, 63, 64, 65, 119, 120, 128, 200, 1000])
def test_matches_reference_for_block_boundaries(length):
    data = bytes((i * 7 + 3) % 256 for i in range(length))
    assert sha1(data) == hashlib.sha1(data).digest()


def test_digest_size_is_twenty_bytes():
    assert len(sha1(b"anything")) == 20
    assert len(SHA1().hexdigest()) == 40


@pytest.mark.parametrize("chunk", [1, 3, 63, 64, 65, 100])
def test_incremental_updates_match_one_shot(chunk):
    data = bytes(range(256)) * 10
    hasher = SHA1()
    for start in range(0, len(data), chunk):
        hasher.update(data[start:start + chunk])
    assert hasher.digest() == sha1(data)


def test_digest_does_not_finalise_state():
    hasher = SHA1(b"first part ")
    first = hasher.digest()
    assert hasher.digest() == first
    hasher.update(b"second part")
    assert hasher.digest() == sha1(b"first part second part")


def test_copy_is_independent():
    original = SHA1(b"shared prefix")
    clone = original.copy()
    clone.update(b" and more")
    assert original.digest() == sha1(b"shared prefix")
    assert clone.digest() == sha1(b"shared prefix and more")


def test_accepts_bytearray_and_memoryview():
    data = b"The quick brown fox jumps over the lazy dog"
    assert sha1(bytearray(data)) == sha1(data)
    assert sha1(memoryview(data)) == sha1(data)


def test_update_leaves_input_unchanged():
    data = bytearray(b"x" * 130)
    before = bytes(data)
    SHA1().update(data)
    assert data == before


def test_long_input_matches_reference():
    data = b"a" * 10000
    assert SHA1(data).hexdigest() == hashlib.sha1(data).hexdigest()


def test_rejects_text():
    with pytest.raises(TypeError):
        SHA1().update("not bytes")


def test_different_inputs_give_different_digests():
    assert sha1(b"message a") != sha1(b"message b")
    assert sha1(b"message a") == hashlib.sha1(b"message a").digest()