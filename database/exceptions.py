class DatabaseError(Exception):
    """Base for all settlement storage errors."""


class DuplicateError(DatabaseError):
    """A settlement row violated a unique constraint."""


class IntegrityError(DatabaseError):
    """A settlement row violated a check constraint (amount, parties, status)."""
