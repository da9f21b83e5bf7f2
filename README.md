# puresha

A SHA-256 implementation in plain Python, with no dependencies beyond the
interpreter. It gives the same digests as `hashlib.sha256` and has a similar
incremental interface. Use it when you want a hash whose every step can be
read and checked.

## Installation

```
pip install puresha
```

## Usage

Everything lives in the `puresha.sha256` module.

Hash a whole message in one call:

```python
from puresha.sha256 import sha256

print(sha256(b"abc").hexdigest())
# ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad
```

Hash data that arrives in pieces:

```python
from puresha.sha256 import Sha256

h = Sha256(b"The powers ")
h.update(b"not delegated")
h.update(b" to the United States")
digest = h.digest()        # 32 raw bytes
text = h.hexdigest()       # 64 lowercase hex characters
```

`Sha256` and `update()` take `bytes`, `bytearray` or `memoryview`. Passing a
`str` raises `TypeError`; encode it first.

`digest()` and `hexdigest()` do not change the object. You can keep calling
`update()` after either of them, and the digest then covers everything fed in
so far.

`copy()` returns an independent hasher with the same state. Use it when you
want to hash several messages that share a prefix:

```python
base = Sha256(b"common prefix:")
first = base.copy()
first.update(b"one")
second = base.copy()
second.update(b"two")
```

Each hasher also has the attributes `name` (`"sha256"`), `digest_size` (32)
and `block_size` (64). The module exports the same sizes as `DIGEST_SIZE`
and `BLOCK_SIZE`.

## What it does not do

The package is a library only: it has no command-line tool, and it provides
SHA-256 alone, with no other hash functions and no HMAC.

## Running the tests

```
pip install "puresha[test]"
pytest
```