import hashlib

import pytest

from multidigest.md5 import MD5, md5


def test_empty_input_vector():
    assert MD5().hexdigest() == "d41d8cd98f00b204e9800998ecf8427e"


def test_abc_vector():
    assert md5(b"abc").hex() == "900150983cd24fb0d6963f7d28e17f72"


def test_message_digest_vector():
    assert MD5(b"message digest").hexdigest() == "f96b697d7cb7938d525a2f31aaf161d0"


@pytest.mark.parametrize("length", [1, 55, 56, 57, 63, 64, 65, 119, 120, 128, 1000, 4097])
def test_matches_reference_across_padding_boundaries(length):
    data = bytes((i * 31 + 7) % 256 for i in range(length))
    assert md5(data) == hashlib.md5(data).digest()


@pytest.mark.parametrize("split", [0, 1, 17, 63, 64, 65, 100, 199, 200])
def test_incremental_equals_one_shot(split):
    data = bytes(range(200))
    hasher = MD5()
    hasher.update(data[:split])
    hasher.update(data[split:])
    assert hasher.digest() == md5(data)


def test_many_small_updates():
    data = b"The quick brown fox jumps over the lazy dog" * 5
    hasher = MD5()
    for byte in data:
        hasher.update(bytes([byte]))
    assert hasher.digest() == md5(data)


def test_digest_does_not_consume_state():
    hasher = MD5(b"hello")
    first = hasher.digest()
    assert hasher.digest() == first
    hasher.update(b" world")
    assert hasher.digest() == md5(b"hello world")


def test_copy_is_independent():
    original = MD5(b"prefix-")
    clone = original.copy()
    clone.update(b"suffix")
    assert original.digest() == md5(b"prefix-")
    assert clone.digest() == md5(b"prefix-suffix")


def test_hexdigest_matches_digest():
    hasher = MD5(b"some bytes")
    assert hasher.hexdigest() == hasher.digest().hex()
    assert len(hasher.digest()) == MD5.digest_size


def test_accepts_bytearray_and_memoryview():
    data = b"buffer protocol input" * 4
    assert md5(bytearray(data)) == md5(data)
    assert md5(memoryview(data)) == md5(data)


def test_rejects_text():
    with pytest.raises(TypeError):
        MD5().update("not bytes")


def test_different_inputs_give_different_digests():
    assert md5(b"a") != md5(b"b")
    assert md5(b"a") == md5(b"a")