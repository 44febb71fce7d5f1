"""
SQL String Builders

Helpers for composing WHERE statements and idempotent index creation
queries, plus the shared constants used by Postgres-backed services.
"""

import os
from typing import Optional

# Schema bundling tables that don't belong to a customer/app
META_NAMESPACE = 'tg'

# strftime format for storing and reading timestamps reproducibly
TIME_FORMAT = '%Y-%m-%d %H:%M:%S.%f UTC'

URL_TEST = 'postgres://{user}@127.0.0.1:5432/tapglue_test?sslmode=disable&connect_timeout=5'

FMT_CLAUSE = '\nAND '
FMT_WHERE = 'WHERE\n%s'

# CREATE INDEX IF NOT EXISTS is unavailable before Postgres 9.5, so the
# create is wrapped in a conditional block instead.
GUARD_INDEX = """DO $$
		BEGIN
		IF NOT EXISTS (
			SELECT 1 FROM pg_indexes WHERE schemaname = '%s' AND indexname = '%s'
		) THEN
		%s;
		END IF;
		END$$;"""


def clauses_to_where(*clauses: str) -> str:
    """Join SQL clauses into a WHERE statement."""
    return FMT_WHERE % FMT_CLAUSE.join(clauses)


def guard_index(namespace: str, index: str, query: str, *args) -> str:
    """
    Wrap an index creation query with a check that the index is absent.

    Args:
        namespace: Schema the index lives in
        index: Name of the index
        query: CREATE INDEX statement; its first two %s placeholders receive
            the index name and the namespace, the rest receive args
        *args: Further values for query's placeholders

    Returns:
        The guarded statement
    """
    return GUARD_INDEX % (namespace, index, query % ((index, namespace) + args))


def database_url_for_tests(user: Optional[str] = None) -> str:
    """
    Build the connection URL of the local test database.

    Args:
        user: Database user (default: CREDKIT_PG_USER environment variable)

    Returns:
        Connection URL
    """
    if user is None:
        user = os.environ.get('CREDKIT_PG_USER')
    if not user:
        raise ValueError("Database user not given and CREDKIT_PG_USER is not set")
    return URL_TEST.format(user=user)
