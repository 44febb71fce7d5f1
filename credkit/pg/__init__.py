"""
Postgres Helpers Package

Error classification and SQL string builders for Postgres-backed services.
Independent of the rest of the toolkit.
"""

from .errors import (
    NotUniqueError,
    RelationNotFoundError,
    is_not_unique,
    is_relation_not_found,
    wrap_error,
)
from .queries import (
    META_NAMESPACE,
    TIME_FORMAT,
    URL_TEST,
    clauses_to_where,
    database_url_for_tests,
    guard_index,
)

__all__ = [
    'NotUniqueError', 'RelationNotFoundError', 'wrap_error',
    'is_not_unique', 'is_relation_not_found',
    'clauses_to_where', 'guard_index', 'database_url_for_tests',
    'META_NAMESPACE', 'TIME_FORMAT', 'URL_TEST',
]
