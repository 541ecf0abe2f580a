"""
Database Dialects - SQL text generation per database type
"""

from .base import DatabaseDialect
from .sqlite_dialect import SQLiteDialect

__all__ = ["DatabaseDialect", "SQLiteDialect"]
