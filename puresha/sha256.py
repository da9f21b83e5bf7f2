"""SHA-256 message digest implemented in pure Python."""

from __future__ import annotations

import struct

__all__ = ["Sha256", "sha256", "DIGEST_SIZE", "BLOCK_SIZE"]

DIGEST_SIZE = 32
BLOCK_SIZE = 64

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

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

_INITIAL_STATE = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

_BLOCK = struct.Struct(">16I")
_DIGEST = struct.Struct(">8I")
_LENGTH = struct.Struct(">Q")


def _rotr(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & _MASK32


def _compress(state: list[int], block: bytes | bytearray | memoryview) -> None:
    """Fold one 64-byte block into the eight-word state in place."""
    w = list(_BLOCK.unpack(block))
    for i in range(16, 64):
        x = w[i - 15]
        y = w[i - 2]
        gamma0 = _rotr(x, 7) ^ _rotr(x, 18) ^ (x >> 3)
        gamma1 = _rotr(y, 17) ^ _rotr(y, 19) ^ (y >> 10)
        w.append((gamma1 + w[i - 7] + gamma0 + w[i - 16]) & _MASK32)

    a, b, c, d, e, f, g, h = state
    for k, wi in zip(_K, w):
        sigma1 = _rotr(e, 6) ^ _rotr(e, 11) ^ _rotr(e, 25)
        ch = g ^ (e & (f ^ g))
        t0 = (h + sigma1 + ch + k + wi) & _MASK32
        sigma0 = _rotr(a, 2) ^ _rotr(a, 13) ^ _rotr(a, 22)
        maj = ((a | b) & c) | (a & b)
        t1 = (sigma0 + maj) & _MASK32
        h, g, f, e, d, c, b, a = g, f, e, (d + t0) & _MASK32, c, b, a, (t0 + t1) & _MASK32

    for i, value in enumerate((a, b, c, d, e, f, g, h)):
        state[i] = (state[i] + value) & _MASK32


class Sha256:
    """Incremental SHA-256 hasher with a hashlib-like interface."""

    name = "sha256"
    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def __init__(self, data: bytes | bytearray | memoryview = b"") -> None:
        self._state = list(_INITIAL_STATE)
        self._buffer = bytearray()
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: bytes | bytearray | memoryview) -> None:
        """Feed more bytes into the hash."""
        if isinstance(data, str):
            raise TypeError("Strings must be encoded before hashing")
        chunk = memoryview(data).cast("B")
        self._length = (self._length + len(chunk)) & _MASK64
        buffer = self._buffer

        pos = 0
        if buffer:
            take = min(BLOCK_SIZE - len(buffer), len(chunk))
            buffer += chunk[:take]
            pos = take
            if len(buffer) < BLOCK_SIZE:
                return
            _compress(self._state, buffer)
            buffer.clear()

        end = len(chunk)
        while end - pos >= BLOCK_SIZE:
            _compress(self._state, chunk[pos:pos + BLOCK_SIZE])
            pos += BLOCK_SIZE
        buffer += chunk[pos:]

    def digest(self) -> bytes:
        """Return the 32-byte digest of everything fed so far."""
        state = list(self._state)
        bit_count = (self._length * 8) & _MASK64
        tail = bytearray(self._buffer)
        tail.append(0x80)
        if len(tail) > BLOCK_SIZE - 8:
            tail.extend(bytes(BLOCK_SIZE - len(tail)))
            _compress(state, tail)
            tail.clear()
        tail.extend(bytes(BLOCK_SIZE - 8 - len(tail)))
        tail += _LENGTH.pack(bit_count)
        _compress(state, tail)
        return _DIGEST.pack(*state)

    def hexdigest(self) -> str:
        """Return the digest as lower-case hexadecimal."""
        return self.digest().hex()

    def copy(self) -> "Sha256":
        """Return an independent hasher with the same state."""
        other = Sha256.__new__(Sha256)
        other._state = list(self._state)
        other._buffer = bytearray(self._buffer)
        other._length = self._length
        return other


def sha256(data: bytes | bytearray | memoryview = b"") -> Sha256:
    """Return a new hasher, optionally primed with ``data``."""
    return Sha256(data)