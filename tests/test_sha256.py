import hashlib

import pytest
from hypothesis import given, strategies as st

from puresha.sha256 import Sha256, sha256


def test_empty_message_digest():
    assert sha256().hexdigest() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_abc_digest():
    assert sha256(b"abc").hexdigest() == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_two_block_message():
    msg = b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq"
    assert sha256(msg).hexdigest() == (
        "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"
    )


@pytest.mark.parametrize("length", [0, 1, 55, 56, 57, 63, 64, 65, 119, 120, 128, 1000])
def test_padding_boundaries_match_reference(length):
    data = bytes((i * 7) & 0xFF for i in range(length))
    assert sha256(data).digest() == hashlib.sha256(data).digest()


def test_digest_length():
    assert len(sha256(b"hello").digest()) == 32


def test_hexdigest_matches_digest():
    h = Sha256(b"some data")
    assert h.hexdigest() == h.digest().hex()


def test_digest_does_not_finalize():
    h = Sha256(b"first")
    before = h.digest()
    assert h.digest() == before
    h.update(b"second")
    assert h.digest() == hashlib.sha256(b"firstsecond").digest()


def test_copy_is_independent():
    h = Sha256(b"prefix-")
    c = h.copy()
    h.update(b"one")
    c.update(b"two")
    assert h.digest() == hashlib.sha256(b"prefix-one").digest()
    assert c.digest() == hashlib.sha256(b"prefix-two").digest()


def test_accepts_bytearray_and_memoryview():
    data = b"x" * 100
    assert Sha256(bytearray(data)).digest() == Sha256(memoryview(data)).digest()
    assert Sha256(memoryview(data)).digest() == hashlib.sha256(data).digest()


def test_rejects_str():
    with pytest.raises(TypeError):
        Sha256().update("text")


def test_rejects_str_in_constructor():
    with pytest.raises(TypeError):
        sha256("text")


def test_large_input():
    data = b"a" * 10000
    assert sha256(data).digest() == hashlib.sha256(data).digest()


@given(st.binary(max_size=300))
def test_matches_reference(data):
    assert sha256(data).digest() == hashlib.sha256(data).digest()


@given(st.lists(st.binary(max_size=90), max_size=8))
def test_incremental_equals_one_shot(chunks):
    h = Sha256()
    for chunk in chunks:
        h.update(chunk)
    assert h.digest() == sha256(b"".join(chunks)).digest()


@given(st.binary(max_size=200), st.integers(min_value=0, max_value=200))
def test_split_point_irrelevant(data, split):
    h = Sha256(data[:split])
    h.update(data[split:])
    assert h.hexdigest() == sha256(data).hexdigest()