"""
Exception Types

Errors raised by the credential toolkit. Every error is raised to the
immediate caller with the underlying cause chained; nothing is retried.
"""


class CredkitError(Exception):
    """Base class for all toolkit errors."""


class ValidationError(CredkitError, ValueError):
    """Raised when an operation is given parameters it cannot accept."""


class KeyDerivationError(ValidationError):
    """Raised when the key derivation function rejects its parameter set."""


class EntropySourceError(CredkitError, OSError):
    """Raised when the secure entropy source fails or returns too few bytes."""
