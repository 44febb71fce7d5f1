"""
Key Derivation Package

This package derives fixed-length keys from passwords with scrypt using
fixed work factor parameters.
"""

from .key_derivation import (
    SCRYPT_KEY_LEN,
    SCRYPT_N,
    SCRYPT_P,
    SCRYPT_R,
    check_parameters,
    derive_key,
    verify_key,
)

__all__ = [
    'derive_key', 'verify_key', 'check_parameters',
    'SCRYPT_N', 'SCRYPT_R', 'SCRYPT_P', 'SCRYPT_KEY_LEN',
]
