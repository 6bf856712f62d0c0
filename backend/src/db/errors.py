"""Helpers for classifying database errors."""
from sqlalchemy.exc import IntegrityError

# SQLSTATE for unique_violation (PostgreSQL, and drivers that mirror it)
UNIQUE_VIOLATION_SQLSTATE = "23505"


def is_unique_violation(error: IntegrityError) -> bool:
    """
    Return True if the IntegrityError was caused by a unique constraint.

    asyncpg/psycopg expose the SQLSTATE on the wrapped driver error; SQLite
    only reports it in the message text.
    """
    orig = error.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate is not None:
        return sqlstate == UNIQUE_VIOLATION_SQLSTATE
    return "UNIQUE constraint failed" in str(orig)
