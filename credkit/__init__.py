"""
credkit - Credential and Identifier Generation Toolkit

Key Features:
- scrypt password key derivation with fixed work factor parameters
- Password salts and RFC 4122 version 4 UUIDs from the OS entropy source
- Fast, seeded, non-cryptographic token generation with unbiased
  alphabet sampling
- Postgres error classification and SQL helpers (credkit.pg)

"""

from .errors import CredkitError, EntropySourceError, KeyDerivationError, ValidationError
from .kdf import derive_key, verify_key
from .secure_random import new_uuid, salt
from .tokens import TokenGenerator, random_bytes, random_string

__version__ = '0.1.0'
__author__ = 'credkit Team'

__all__ = [
    'derive_key', 'verify_key', 'salt', 'new_uuid',
    'random_bytes', 'random_string', 'TokenGenerator',
    'CredkitError', 'ValidationError', 'KeyDerivationError', 'EntropySourceError',
]
