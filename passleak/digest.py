"""Secret hashing for the k-anonymity range protocol.

The secret is hashed with SHA-1 and rendered as 40 uppercase hex characters.
Only the first 5 characters (the prefix) are ever sent to the range API; the
remaining 35 (the suffix) stay in a zeroable buffer and are compared in
constant time.
"""

import hashlib
from contextlib import contextmanager
from typing import Generator

from passleak.config import HASH_SIZE, PREFIX_SIZE
from passleak.matcher import constant_time_equals
from passleak.secure_memory import SecureBytes, secure_scope


Secret = str | bytes | bytearray | memoryview


class Suffix(SecureBytes):
    """The last 35 hex characters of a secret's digest.

    Comparing values is a constant-time operation.
    """

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SecureBytes):
            other = other.get_bytearray()
        if not isinstance(other, (bytes, bytearray, memoryview)):
            return NotImplemented
        return constant_time_equals(self.get_bytearray(), other)

    __hash__ = None


def _hex_char(nibble: int) -> int:
    """Map a nibble to its uppercase hex ASCII code without branching.

    (9 - nibble) >> 8 is -1 for nibbles 10..15 and 0 otherwise, which adds
    the 7-character gap between '9' and 'A' only for letters.
    """
    return nibble + 0x30 + (((9 - nibble) >> 8) & 0x07)


def encode_hex_upper(data: bytes | bytearray) -> bytearray:
    """Encode bytes as uppercase hex with data-independent timing.

    Returns:
        New bytearray of ASCII hex characters, twice the input length
    """
    out = bytearray(len(data) * 2)
    for i, byte in enumerate(data):
        out[2 * i] = _hex_char(byte >> 4)
        out[2 * i + 1] = _hex_char(byte & 0x0F)
    return out


def digest(secret: Secret) -> SecureBytes:
    """Compute the uppercase hex SHA-1 digest of a secret.

    Strings are encoded as UTF-8. The secret copy and the raw digest are
    zeroed before returning; the caller owns the returned buffer and must
    clear it (``hash_secret`` does this).

    Args:
        secret: Password or other secret to hash

    Returns:
        SecureBytes holding 40 uppercase hex ASCII characters

    Raises:
        TypeError: If secret is not text or bytes-like
    """
    if isinstance(secret, str):
        secret = secret.encode("utf-8")
    elif not isinstance(secret, (bytes, bytearray, memoryview)):
        raise TypeError(f"Cannot hash secret of type: {type(secret).__name__}")

    with SecureBytes(bytearray(secret)) as secret_buf:
        # SHA-1 is mandated by the range API; it is a lookup key here
        hasher = hashlib.sha1(secret_buf.get_bytearray(), usedforsecurity=False)
    with SecureBytes(hasher.digest()) as raw:
        return SecureBytes(encode_hex_upper(raw.get_bytearray()))


def split_digest(digest_hex: SecureBytes) -> tuple[str, Suffix]:
    """Split a hex digest into the public prefix and the private suffix.

    Args:
        digest_hex: 40 hex characters as produced by ``digest``

    Returns:
        Tuple of (prefix, suffix): a 5-char str and a 35-char Suffix buffer

    Raises:
        ValueError: If the digest does not have the expected length
    """
    data = digest_hex.get_bytearray()
    if len(data) != HASH_SIZE:
        raise ValueError(f"Digest must be {HASH_SIZE} hex characters, got {len(data)}")
    prefix = data[:PREFIX_SIZE].decode("ascii")
    return prefix, Suffix(data[PREFIX_SIZE:])


@contextmanager
def hash_secret(secret: Secret) -> Generator[tuple[str, Suffix], None, None]:
    """Hash a secret into a prefix and suffix for the duration of a block.

    Usage:
        with hash_secret(password) as (prefix, suffix):
            candidates = await fetcher.fetch(prefix)
            count = match_suffix(suffix, candidates)
        # digest and suffix are zeroed here, also on error or cancellation
    """
    digest_hex = digest(secret)
    with secure_scope(digest_hex):
        prefix, suffix = split_digest(digest_hex)
        with secure_scope(suffix):
            yield prefix, suffix
