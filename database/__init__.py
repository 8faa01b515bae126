from database.connection import DatabasePool, db
from database.repositories import SettlementRepositoryDB
from database.exceptions import DatabaseError, DuplicateError, IntegrityError

__all__ = [
    "DatabasePool",
    "db",
    "SettlementRepositoryDB",
    "DatabaseError",
    "DuplicateError",
    "IntegrityError",
]
