"""Pure-Python SHA-256 hashing; see the ``puresha.sha256`` module."""

__version__ = "0.1.0"
__all__ = ["sha256"]