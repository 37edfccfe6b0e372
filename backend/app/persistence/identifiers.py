"""
Identifier parsing and driver error classification shared by the DAOs.
"""

import re
import uuid
from typing import Any, Optional

from sqlalchemy.exc import DBAPIError

from app.exceptions import InvalidIdentifierError

# PostgreSQL SQLSTATE for foreign_key_violation
FOREIGN_KEY_VIOLATION = "23503"

_HYPHENATED = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"

# simple | hyphenated | {hyphenated} | urn:uuid:hyphenated
UUID_PATTERN = re.compile(
    rf"[0-9a-fA-F]{{32}}|{_HYPHENATED}|\{{{_HYPHENATED}\}}|urn:uuid:{_HYPHENATED}"
)


def parse_uuid(value: Any) -> uuid.UUID:
    """
    Parse `value` as a UUID.

    Four textual forms are accepted: 32 bare hex digits, the canonical
    8-4-4-4-12 hyphenated form, the hyphenated form wrapped in braces, and
    the hyphenated form prefixed with `urn:uuid:`. Hex digits may be upper or
    lower case. Anything else is rejected before `uuid.UUID` sees it, since
    that constructor strips stray hyphens, braces and prefixes.

    Raises:
        InvalidIdentifierError: value is not a string or not a UUID.
    """
    if not isinstance(value, str):
        raise InvalidIdentifierError(
            message=f"Invalid uuid {value!r}: expected a string",
            identifier=str(value),
        )
    if UUID_PATTERN.fullmatch(value) is None:
        raise InvalidIdentifierError(
            message=f"Invalid uuid {value!r}: not a UUID",
            identifier=value,
        )
    try:
        return uuid.UUID(value)
    except ValueError as exc:
        raise InvalidIdentifierError(
            message=f"Invalid uuid {value!r}: {exc}",
            identifier=value,
        ) from exc


def sqlstate_of(exc: DBAPIError) -> Optional[str]:
    """
    Return the SQLSTATE reported by the database driver, if any.

    SQLAlchemy's asyncpg adapter copies it onto the wrapped DBAPI error as
    both `sqlstate` and `pgcode`; psycopg exposes `sqlstate` (v3) or
    `pgcode` (v2). The driver's own exception is checked as a fallback.
    """
    orig = getattr(exc, "orig", None)
    for candidate in (orig, getattr(orig, "__cause__", None)):
        if candidate is None:
            continue
        code = getattr(candidate, "sqlstate", None) or getattr(candidate, "pgcode", None)
        if isinstance(code, str) and code:
            return code
    return None
