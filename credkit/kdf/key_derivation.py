"""
Password Key Derivation

This module derives fixed-length keys from passwords using scrypt with a
single, fixed parameter set. The work factor is a module constant so that
every caller gets the same security posture.
"""

import hmac
import logging
from typing import Union

from Cryptodome.Protocol.KDF import scrypt

from ..errors import KeyDerivationError, ValidationError

logger = logging.getLogger(__name__)

# scrypt work factor parameters
SCRYPT_N = 32768       # CPU/memory cost, 2^15
SCRYPT_R = 8           # Block size
SCRYPT_P = 1           # Parallelization
SCRYPT_KEY_LEN = 256   # Output size in bytes

BytesLike = Union[bytes, bytearray, memoryview]


def _to_bytes(value: Union[str, BytesLike]) -> bytes:
    if isinstance(value, str):
        return value.encode('utf-8')
    return bytes(value)


def check_parameters(n: int, r: int, p: int, key_len: int) -> None:
    """
    Validate an scrypt parameter set.

    Args:
        n: CPU/memory cost, must be a power of two greater than 1
        r: Block size
        p: Parallelization
        key_len: Length of the derived key in bytes

    Raises:
        KeyDerivationError: If any parameter is out of range
    """
    if n <= 1 or n & (n - 1) != 0:
        raise KeyDerivationError(f"scrypt N must be a power of two greater than 1, got {n}")
    if n >= 2 ** 32:
        raise KeyDerivationError(f"scrypt N is too big: {n}")
    if r < 1 or p < 1:
        raise KeyDerivationError(f"scrypt r and p must be positive, got r={r} p={p}")
    if p > ((2 ** 32 - 1) * 32) // (128 * r):
        raise KeyDerivationError(f"scrypt p or r are too big: r={r} p={p}")
    if key_len < 1:
        raise KeyDerivationError(f"Derived key length must be positive, got {key_len}")


def derive_key(password: Union[str, BytesLike], salt: BytesLike) -> bytes:
    """
    Derive a key from a password and salt using scrypt.

    The result is deterministic for a given (password, salt) pair. This is
    deliberately slow; keep it off latency-sensitive paths.

    Args:
        password: Password to derive the key from (str is UTF-8 encoded)
        salt: Salt value as bytes, may be empty

    Returns:
        Derived key of SCRYPT_KEY_LEN bytes

    Raises:
        KeyDerivationError: If scrypt rejects the parameter set
        ValidationError: If salt is not a bytes-like value
    """
    if isinstance(salt, str):
        raise ValidationError("Salt must be bytes, not str")

    check_parameters(SCRYPT_N, SCRYPT_R, SCRYPT_P, SCRYPT_KEY_LEN)
    salt = bytes(salt)

    logger.debug(
        "Deriving key with scrypt N=%d r=%d p=%d key_len=%d salt_len=%d",
        SCRYPT_N, SCRYPT_R, SCRYPT_P, SCRYPT_KEY_LEN, len(salt),
    )

    try:
        return scrypt(
            _to_bytes(password),
            salt,
            key_len=SCRYPT_KEY_LEN,
            N=SCRYPT_N,
            r=SCRYPT_R,
            p=SCRYPT_P,
        )
    except ValueError as exc:
        raise KeyDerivationError(f"scrypt rejected parameters: {exc}") from exc


def verify_key(password: Union[str, BytesLike], salt: BytesLike, expected: BytesLike) -> bool:
    """
    Check a password against a previously derived key.

    Args:
        password: Candidate password
        salt: Salt the expected key was derived with
        expected: Previously derived key

    Returns:
        True if the derived key matches, False otherwise
    """
    # Use constant-time comparison to prevent timing attacks
    return hmac.compare_digest(derive_key(password, salt), _to_bytes(expected))


if __name__ == "__main__":
    import os

    logging.basicConfig(level=logging.DEBUG)

    salt = os.urandom(16)
    key = derive_key("secure_password_example", salt)
    print(f"Salt: {salt.hex()}")
    print(f"Derived key ({len(key)} bytes): {key.hex()[:64]}...")

    assert verify_key("secure_password_example", salt, key)
    assert not verify_key("wrong_password", salt, key)

    print("Key derivation checks completed successfully!")
