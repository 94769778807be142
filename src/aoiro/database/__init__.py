"""Database layer for aoiro application."""

from aoiro.database.base import Database
from aoiro.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
