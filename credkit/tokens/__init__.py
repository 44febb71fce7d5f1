"""
Token Generation Package

This package generates printable, non-cryptographic tokens from seeded
pseudo-random generators.
"""

from .token_generator import ALPHABET, TokenGenerator, random_bytes, random_string

__all__ = ['TokenGenerator', 'random_bytes', 'random_string', 'ALPHABET']
