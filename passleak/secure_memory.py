"""Secure memory handling for secret-derived data.

Secrets, their digests and digest suffixes live in zeroable buffers for
exactly one breach check. Python strings are immutable and garbage-collected,
so this module provides best-effort protections only:

1. SecureBytes: bytearray wrapper that is zeroed explicitly or on scope exit
2. secure_zero: overwrites a bytearray/memoryview in place
3. secure_scope: clears several buffers on every exit path

SECURITY NOTES:
- Immutable copies (str, bytes) handed in by callers cannot be erased
- hashlib returns its digest as bytes; copy it into SecureBytes immediately
- Cancellation of an awaiting task still runs ``finally`` blocks, so scoped
  buffers are cleared when a check is cancelled mid-fetch
"""

from contextlib import contextmanager
from typing import Generator


def secure_zero(data: bytearray | memoryview) -> None:
    """Overwrite a bytearray or memoryview with zeros in place.

    Args:
        data: Mutable bytes object to zero out

    Raises:
        TypeError: If data is not a mutable bytes type
    """
    if isinstance(data, memoryview):
        if data.readonly:
            raise TypeError("Cannot zero readonly memoryview")
        data[:] = bytes(len(data))
    elif isinstance(data, bytearray):
        data[:] = bytes(len(data))
    else:
        raise TypeError(f"Cannot securely zero type: {type(data)}")


class SecureBytes:
    """A bytearray holder that can be explicitly zeroed.

    Usage:
        with SecureBytes(secret_bytes) as buf:
            hasher.update(buf.get_bytearray())
        # buf is zeroed here

    The buffer passed in is adopted without copying when it is already a
    bytearray, so callers can hand over ownership of freshly built buffers.
    """

    __slots__ = ('_data', '_cleared')

    def __init__(self, data: bytes | bytearray | memoryview | None = None):
        if data is None:
            self._data = bytearray()
        elif isinstance(data, bytearray):
            self._data = data
        else:
            self._data = bytearray(data)
        self._cleared = False

    def get(self) -> bytes:
        """Get an immutable copy of the data.

        WARNING: The returned bytes object cannot be securely erased.

        Raises:
            RuntimeError: If data has already been cleared
        """
        if self._cleared:
            raise RuntimeError("Secure data has already been cleared")
        return bytes(self._data)

    def get_bytearray(self) -> bytearray:
        """Get the internal bytearray without copying.

        WARNING: Do not hold references to it past clear().

        Raises:
            RuntimeError: If data has already been cleared
        """
        if self._cleared:
            raise RuntimeError("Secure data has already been cleared")
        return self._data

    def clear(self) -> None:
        """Zero and release the internal data. Idempotent."""
        if not self._cleared:
            secure_zero(self._data)
            self._data = bytearray()
            self._cleared = True

    @property
    def is_cleared(self) -> bool:
        return self._cleared

    def __len__(self) -> int:
        if self._cleared:
            return 0
        return len(self._data)

    def __enter__(self) -> 'SecureBytes':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.clear()

    def __del__(self) -> None:
        if hasattr(self, '_cleared') and not self._cleared:
            self.clear()

    def __repr__(self) -> str:
        """Safe repr that doesn't expose data."""
        if self._cleared:
            return f"{type(self).__name__}(<cleared>)"
        return f"{type(self).__name__}(<{len(self._data)} bytes>)"

    __str__ = __repr__


@contextmanager
def secure_scope(*secure_objects: SecureBytes) -> Generator[None, None, None]:
    """Clear several secure buffers when the block exits.

    Usage:
        with secure_scope(digest_hex, suffix):
            await fetch(prefix)
        # both buffers are zeroed, even on error or cancellation
    """
    try:
        yield
    finally:
        for obj in secure_objects:
            obj.clear()
