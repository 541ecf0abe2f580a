"""
Result Set - Cursor-like, forward/seekable view over a fetched statement result

Mirrors the shape of a platform database cursor: a position that starts
before the first row, seek/advance methods that report whether a row is
available, and typed cell access by column index.
"""

from enum import Enum
from typing import Any, List, Optional, Sequence

from ..constants import NULL_DISPLAY


class ColumnType(Enum):
    """Runtime storage class of a cell value."""
    NULL = "null"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    BLOB = "blob"

    @classmethod
    def of(cls, value: Any) -> "ColumnType":
        """Return the storage class of a Python value coming from sqlite3."""
        if value is None:
            return cls.NULL
        if isinstance(value, (bytes, bytearray, memoryview)):
            return cls.BLOB
        if isinstance(value, int):
            return cls.INTEGER
        if isinstance(value, float):
            return cls.FLOAT
        return cls.STRING


class ResultSet:
    """
    Fetched rows of one statement (all of them, or one window) plus a
    movable cursor position over the whole result.

    Usage:
        rs = ResultSet(["id", "name"], [(1, "a"), (2, "b")])
        if rs.move_to_position(1):
            rs.get_string(1)  # "b"
    """

    def __init__(self, column_names: Sequence[str], rows: Sequence[Sequence[Any]],
                 row_count: Optional[int] = None, offset: int = 0):
        """
        Args:
            column_names: Result column names
            rows: Fetched rows (the whole result, or a window of it)
            row_count: Size of the whole result (None = len(rows))
            offset: Absolute index of rows[0] in the whole result
        """
        self._column_names: List[str] = list(column_names)
        self._rows: List[Sequence[Any]] = list(rows)
        self._row_count = len(self._rows) if row_count is None else row_count
        self._offset = offset
        self._position = -1

    @classmethod
    def from_cursor(cls, cursor) -> "ResultSet":
        """Build a result set from an executed DB-API cursor."""
        description = cursor.description or ()
        column_names = [col[0] for col in description]
        return cls(column_names, cursor.fetchall())

    # -------------------------------------------------------------------------
    # Shape
    # -------------------------------------------------------------------------

    @property
    def row_count(self) -> int:
        return self._row_count

    @property
    def loaded_row_count(self) -> int:
        """Number of rows actually held in memory."""
        return len(self._rows)

    @property
    def column_count(self) -> int:
        return len(self._column_names)

    @property
    def column_names(self) -> List[str]:
        return self._column_names.copy()

    def column_name(self, index: int) -> str:
        """Get the name of the column at index."""
        return self._column_names[index]

    # -------------------------------------------------------------------------
    # Cursor movement
    # -------------------------------------------------------------------------

    @property
    def position(self) -> int:
        """Current row index (-1 before first row, row_count after last)."""
        return self._position

    def move_to_position(self, position: int) -> bool:
        """
        Move the cursor to an absolute row index.

        The position is clamped to [-1, row_count].

        Returns:
            True if the cursor sits on a fetched row
        """
        if position < 0:
            self._position = -1
            return False
        if position >= self.row_count:
            self._position = self.row_count
            return False
        self._position = position
        return self.is_on_row()

    def move_to_first(self) -> bool:
        return self.move_to_position(0)

    def move_to_next(self) -> bool:
        return self.move_to_position(self._position + 1)

    def is_on_row(self) -> bool:
        """True if the cursor sits on a fetched row."""
        return 0 <= self._position - self._offset < len(self._rows)

    # -------------------------------------------------------------------------
    # Cell access (current row)
    # -------------------------------------------------------------------------

    def _current_row(self) -> Sequence[Any]:
        if not self.is_on_row():
            raise IndexError(
                f"Cursor is not on a row (position {self._position}, {self.row_count} rows)"
            )
        return self._rows[self._position - self._offset]

    def get_value(self, column: int) -> Any:
        """Raw value of the column in the current row."""
        return self._current_row()[column]

    def column_type(self, column: int) -> ColumnType:
        """Runtime type of the column in the current row."""
        return ColumnType.of(self.get_value(column))

    def get_string(self, column: int) -> str:
        """Value of the column in the current row as text (NULL -> empty)."""
        value = self.get_value(column)
        if value is None:
            return NULL_DISPLAY
        if isinstance(value, (bytes, bytearray, memoryview)):
            return bytes(value).decode("utf-8", errors="replace")
        return str(value)
