"""
Database access - read-only statement execution against SQLite files
"""

from .result_set import ColumnType, ResultSet
from .row_source import SQLiteRowSource

__all__ = ["ColumnType", "ResultSet", "SQLiteRowSource"]
