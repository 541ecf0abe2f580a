"""
Row Source - Run one statement against a SQLite file and map its result

Each call opens its own read-only connection and closes it on every exit
path; nothing is kept open between calls.

Usage:
    source = SQLiteRowSource()
    count = source.execute(db_path, 'SELECT * FROM "t"', lambda rs: rs.row_count)
"""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Optional, Sequence, TypeVar, Union

from .dialects import DatabaseDialect, SQLiteDialect
from .result_set import ResultSet
from ..errors import DataAccessError

import logging
logger = logging.getLogger(__name__)

T = TypeVar('T')

ResultMapper = Callable[[ResultSet], T]


def _decode_text(value: bytes) -> str:
    return value.decode("utf-8", errors="replace")


class SQLiteRowSource:
    """Executes statements against SQLite database files (read-only)."""

    def __init__(self, timeout: float = 5.0, dialect: Optional[DatabaseDialect] = None):
        """
        Args:
            timeout: Seconds to wait on a locked database before failing
            dialect: SQL text generator for count and page-window statements
        """
        self.timeout = timeout
        self.dialect = dialect or SQLiteDialect()

    @staticmethod
    def _database_uri(database_path: Union[str, Path]) -> str:
        """Read-only URI for a database file."""
        return Path(database_path).resolve().as_uri() + "?mode=ro"

    @contextmanager
    def open_connection(self, database_path: Union[str, Path]):
        """
        Open a read-only connection scoped to the with-block.

        Yields:
            sqlite3.Connection: Database connection
        """
        conn = sqlite3.connect(
            self._database_uri(database_path), uri=True, timeout=self.timeout
        )
        # TEXT cells are not guaranteed to be valid UTF-8
        conn.text_factory = _decode_text
        try:
            yield conn
        finally:
            conn.close()

    def execute(
        self,
        database_path: Union[str, Path],
        statement: str,
        mapper: ResultMapper,
        params: Sequence = (),
    ) -> T:
        """
        Run a statement and map its result set.

        Args:
            database_path: Path to the SQLite file
            statement: SQL or PRAGMA text
            mapper: Function turning the ResultSet into the returned value
            params: Statement parameters

        Returns:
            Whatever mapper returns

        Raises:
            DataAccessError: If the file cannot be opened or the statement fails
        """
        logger.debug(f"Executing on {database_path}: {statement}")
        try:
            with self.open_connection(database_path) as conn:
                cursor = conn.cursor()
                try:
                    cursor.execute(statement, params)
                    result_set = ResultSet.from_cursor(cursor)
                finally:
                    cursor.close()
        except sqlite3.Error as e:
            raise DataAccessError(
                f"Cannot run statement on {database_path}: {e}",
                statement=statement,
                database_path=str(database_path),
            ) from e

        return mapper(result_set)

    def execute_page(
        self,
        database_path: Union[str, Path],
        statement: str,
        offset: int,
        limit: int,
        mapper: ResultMapper,
    ) -> T:
        """
        Run a SELECT but only fetch the rows of one page.

        The total row count comes from a COUNT(*) over the same statement,
        run on the same connection, so the ResultSet reports the full size
        while holding at most limit rows.

        Args:
            database_path: Path to the SQLite file
            statement: SELECT text (no LIMIT clause)
            offset: Absolute index of the first row to fetch
            limit: Maximum number of rows to fetch
            mapper: Function turning the ResultSet into the returned value

        Returns:
            Whatever mapper returns

        Raises:
            DataAccessError: If the file cannot be opened or the statement fails
        """
        count_statement = self.dialect.generate_count_query(statement)
        page_statement = self.dialect.apply_page_window(statement)
        logger.debug(f"Executing on {database_path}: {page_statement} [{limit}, {offset}]")
        try:
            with self.open_connection(database_path) as conn:
                cursor = conn.cursor()
                try:
                    cursor.execute(count_statement)
                    total = cursor.fetchone()[0]
                    cursor.execute(page_statement, (limit, offset))
                    column_names = [col[0] for col in cursor.description or ()]
                    result_set = ResultSet(
                        column_names, cursor.fetchall(), row_count=total, offset=offset
                    )
                finally:
                    cursor.close()
        except sqlite3.Error as e:
            raise DataAccessError(
                f"Cannot run statement on {database_path}: {e}",
                statement=statement,
                database_path=str(database_path),
            ) from e

        return mapper(result_set)
