"""
Secure Random Package

This package wraps the operating system entropy source to produce
password salts and version 4 UUIDs.
"""

from .entropy import SALT_LEN, UUID_LEN, format_uuid, new_uuid, read_entropy, salt

__all__ = ['salt', 'new_uuid', 'format_uuid', 'read_entropy', 'SALT_LEN', 'UUID_LEN']
