"""
Constraint violation taxonomy.

Every rejected row operation raises one of these. The registry raises them
directly for violations it can see before touching the database and
translates IntegrityError for the ones only the database can see.
"""
from typing import Optional

from sqlalchemy.exc import IntegrityError


class ConstraintViolation(Exception):
    kind = "CONSTRAINT-VIOLATION"

    def __init__(self, message: str = None, constraint: str = None):
        self.constraint = constraint
        self.message = message or f"{self.kind}: {constraint or 'constraint failed'}"
        super().__init__(self.message)


class UniqueViolation(ConstraintViolation):
    kind = "UNIQUE-VIOLATION"


class CheckViolation(ConstraintViolation):
    kind = "CHECK-VIOLATION"


class ReferenceViolation(ConstraintViolation):
    kind = "REFERENCE-VIOLATION"


class NotFoundError(Exception):
    """Row targeted by an update does not exist."""

    def __init__(self, entity: str, row_id):
        self.entity = entity
        self.row_id = row_id
        self.message = f"{entity} {row_id} not found"
        super().__init__(self.message)


# SQLSTATE class 23 codes (PostgreSQL, also used by several other drivers)
_SQLSTATE_KINDS = {
    '23505': UniqueViolation,
    '23514': CheckViolation,
    '23503': ReferenceViolation,
}

# SQLite reports violations in the message text only
_SQLITE_PREFIXES = [
    ('UNIQUE constraint failed', UniqueViolation),
    ('CHECK constraint failed', CheckViolation),
    ('FOREIGN KEY constraint failed', ReferenceViolation),
]


def _sqlstate(orig) -> Optional[str]:
    # psycopg2 exposes pgcode, psycopg 3 exposes sqlstate
    return getattr(orig, 'pgcode', None) or getattr(orig, 'sqlstate', None)


def translate_integrity_error(exc: IntegrityError) -> ConstraintViolation:
    """Map a database IntegrityError onto the violation taxonomy."""
    orig = exc.orig
    text = str(orig)

    code = _sqlstate(orig)
    if code in _SQLSTATE_KINDS:
        diag = getattr(orig, 'diag', None)
        constraint = getattr(diag, 'constraint_name', None)
        return _SQLSTATE_KINDS[code](text, constraint=constraint)

    for prefix, violation_cls in _SQLITE_PREFIXES:
        if text.startswith(prefix):
            constraint = text[len(prefix):].lstrip(': ').strip() or None
            return violation_cls(text, constraint=constraint)

    return ConstraintViolation(text)
