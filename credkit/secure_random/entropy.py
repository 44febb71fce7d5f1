"""
Secure Random Values

This module produces salts and RFC 4122 version 4 UUIDs from the operating
system's cryptographically secure entropy source.
"""

import secrets
from typing import Callable, Optional

from ..errors import EntropySourceError

SALT_LEN = 256  # Salt size in bytes
UUID_LEN = 16   # Raw UUID size in bytes

EntropySource = Callable[[int], bytes]


def read_entropy(n: int, source: Optional[EntropySource] = None) -> bytes:
    """
    Read exactly n bytes from an entropy source.

    Args:
        n: Number of bytes to read
        source: Callable returning up to n bytes (default: secrets.token_bytes)

    Returns:
        n random bytes

    Raises:
        EntropySourceError: If the source fails or returns fewer than n bytes
    """
    if source is None:
        source = secrets.token_bytes

    try:
        data = source(n)
    except OSError as exc:
        raise EntropySourceError(f"Entropy source could not be read: {exc}") from exc

    if len(data) < n:
        raise EntropySourceError(f"Entropy source returned {len(data)} of {n} bytes")

    return bytes(data[:n])


def salt(source: Optional[EntropySource] = None) -> bytes:
    """
    Generate a salt for password key derivation.

    Args:
        source: Optional entropy source (default: secrets.token_bytes)

    Returns:
        SALT_LEN random bytes
    """
    return read_entropy(SALT_LEN, source)


def format_uuid(raw: bytes) -> str:
    """
    Stamp version 4 marker bits onto 16 bytes and render them as a UUID.

    Args:
        raw: 16 bytes of randomness

    Returns:
        Lowercase 8-4-4-4-12 hex string
    """
    if len(raw) != UUID_LEN:
        raise ValueError(f"UUID requires {UUID_LEN} bytes, got {len(raw)}")

    b = bytearray(raw)
    # Variant bits 10, RFC 4122 section 4.1.1
    b[8] = (b[8] & 0x3F) | 0x80
    # Version 4 (random), RFC 4122 section 4.1.3
    b[6] = (b[6] & 0x0F) | 0x40

    return '-'.join((
        b[0:4].hex(),
        b[4:6].hex(),
        b[6:8].hex(),
        b[8:10].hex(),
        b[10:16].hex(),
    ))


def new_uuid(source: Optional[EntropySource] = None) -> str:
    """
    Generate a random UUID according to RFC 4122.

    Args:
        source: Optional entropy source (default: secrets.token_bytes)

    Returns:
        36-character UUID string

    Raises:
        EntropySourceError: If fewer than 16 bytes could be read
    """
    return format_uuid(read_entropy(UUID_LEN, source))


if __name__ == "__main__":
    s = salt()
    print(f"Salt ({len(s)} bytes): {s[:16].hex()}...")
    assert len(s) == SALT_LEN
    assert s != salt()

    u = new_uuid()
    print(f"UUID: {u}")
    assert u[14] == '4'
    assert u[19] in '89ab'

    print("Secure random checks completed successfully!")
