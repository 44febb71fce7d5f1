"""
PostgreSQL Error Classification

Maps driver errors carrying a SQLSTATE code onto the two conditions callers
branch on: unique-constraint violations and missing relations.
"""

from typing import Optional

from ..errors import CredkitError

CODE_DUPLICATE_KEY_VIOLATION = '23505'
CODE_RELATION_NOT_FOUND = '42P01'


class NotUniqueError(CredkitError):
    """Raised when an update violates a unique constraint on a table."""


class RelationNotFoundError(CredkitError):
    """Raised when the queried relation does not exist."""


def _sqlstate(err: BaseException) -> Optional[str]:
    # SQLAlchemy wraps the driver error in .orig
    orig = getattr(err, 'orig', None)
    if isinstance(orig, BaseException):
        err = orig
    # psycopg2 exposes .pgcode, psycopg 3 exposes .sqlstate
    return getattr(err, 'pgcode', None) or getattr(err, 'sqlstate', None)


def wrap_error(err: Optional[BaseException]) -> Optional[BaseException]:
    """
    Translate a database error into a sentinel error where one applies.

    Args:
        err: Error raised by the database driver, or None

    Returns:
        NotUniqueError or RelationNotFoundError chained to err, otherwise err
        unchanged
    """
    if err is None:
        return None

    code = _sqlstate(err)
    if code == CODE_DUPLICATE_KEY_VIOLATION:
        wrapped = NotUniqueError('entity not unique')
    elif code == CODE_RELATION_NOT_FOUND:
        wrapped = RelationNotFoundError('relation not found')
    else:
        return err

    wrapped.__cause__ = err
    return wrapped


def is_not_unique(err: Optional[BaseException]) -> bool:
    """Indicate if err is a NotUniqueError."""
    return isinstance(err, NotUniqueError)


def is_relation_not_found(err: Optional[BaseException]) -> bool:
    """Indicate if err is a RelationNotFoundError."""
    return isinstance(err, RelationNotFoundError)
