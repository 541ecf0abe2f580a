"""
Table View - Paged, sortable, read-only browsing of one table

The engine keeps the browsing state (page position, sort column and
direction) and turns a query result into display-ready rows. It never
fetches on its own: navigation methods only move the state, the caller
fetches again to see the effect.

Not thread-safe: callers serialize navigation and fetches (e.g. from a
single UI thread).

Usage:
    view = TableView("app.db", "users", start_page=0)
    rows = view.get_content_page()      # header + up to rows_per_page rows
    view.toggle_order_by_column("name")
    rows = view.get_content_page()      # first page, sorted by name
"""

import math
from pathlib import Path
from typing import Callable, List, Optional, Tuple, TypeVar, Union

from .models import MaterializedRow, PragmaType, RowKind, SortOrder
from ..config.user_preferences import UserPreferences, get_rows_per_page
from ..constants import (
    BLOB_PLACEHOLDER,
    PREF_KEY_ROWS_PER_PAGE,
    SORT_ASC_GLYPH,
    SORT_DESC_GLYPH,
)
from ..database.dialects import DatabaseDialect, SQLiteDialect
from ..database.result_set import ColumnType, ResultSet
from ..database.row_source import SQLiteRowSource
from ..errors import DataAccessError

import logging
logger = logging.getLogger(__name__)

ColumnHeaderListener = Callable[[str], None]
T = TypeVar("T")

DEFAULT_SORT_ORDER = SortOrder.ASC


class TableView:
    """
    Paging/sorting/materialization engine for a single table.

    Each fetch (get_content_page, get_by_pragma) opens its own database
    connection through the row source and releases it before returning.
    """

    def __init__(
        self,
        database_path: Union[str, Path],
        table_name: str,
        start_page: int = 0,
        preferences: Optional[UserPreferences] = None,
        rows_per_page: Optional[int] = None,
        row_count: int = 0,
        row_source: Optional[SQLiteRowSource] = None,
        dialect: Optional[DatabaseDialect] = None,
    ):
        """
        Initialize the table view.

        Args:
            database_path: SQLite file to browse
            table_name: Table to browse
            start_page: Requested start page, clamped to [0, page count]
            preferences: Source of the rows-per-page setting
            rows_per_page: Explicit page size (overrides preferences)
            row_count: Previously known total row count, used for the
                       start page clamp (0 = unknown)
            row_source: Statement executor (default SQLiteRowSource)
            dialect: SQL text generator (default SQLiteDialect)

        Raises:
            ConfigurationError: If the page size is not a positive integer
        """
        self._database_path = database_path
        self._table_name = table_name
        self._dialect = dialect or SQLiteDialect()
        self._row_source = row_source or SQLiteRowSource(dialect=self._dialect)

        if rows_per_page is None:
            self._rows_per_page = get_rows_per_page(preferences)
        else:
            self._rows_per_page = get_rows_per_page(
                UserPreferences.from_dict({PREF_KEY_ROWS_PER_PAGE: rows_per_page})
            )

        self._order_by_column_name = ""
        self._sort_order = DEFAULT_SORT_ORDER
        self._count = max(0, row_count)
        self._on_click_column_header_listener: Optional[ColumnHeaderListener] = None

        page_count = self.get_page_count()
        start_page = min(max(start_page, 0), page_count)
        self._position = self._rows_per_page * start_page

        logger.debug(
            f"TableView {table_name}: {self._rows_per_page} rows/page, "
            f"start position {self._position}"
        )

    # -------------------------------------------------------------------------
    # State accessors
    # -------------------------------------------------------------------------

    @property
    def database_path(self) -> Union[str, Path]:
        return self._database_path

    @property
    def table_name(self) -> str:
        return self._table_name

    @property
    def rows_per_page(self) -> int:
        return self._rows_per_page

    @property
    def position(self) -> int:
        """Zero-based offset of the first row of the current page."""
        return self._position

    @property
    def row_count(self) -> int:
        """Row count of the last content fetch (0 before any fetch)."""
        return self._count

    @property
    def order_by_column_name(self) -> str:
        """Sort column, "" for natural order."""
        return self._order_by_column_name

    @property
    def sort_order(self) -> SortOrder:
        return self._sort_order

    # -------------------------------------------------------------------------
    # Fetches
    # -------------------------------------------------------------------------

    def get_by_pragma(self, pragma_type: PragmaType) -> List[MaterializedRow]:
        """
        List table metadata (all rows, no paging).

        Args:
            pragma_type: FOREIGN_KEY, INDEX_LIST or TABLE_INFO

        Returns:
            Header row followed by one row per metadata entry; an empty
            list when the metadata kind is not supported

        Raises:
            DataAccessError: If the statement cannot be run
        """
        statement = None
        if isinstance(pragma_type, PragmaType):
            statement = self._dialect.pragma_statement(pragma_type, self._table_name)

        if statement is None:
            logger.warning(f"Pragma type unknown: {pragma_type}")
            return []

        def provide_result(result_set: ResultSet) -> List[MaterializedRow]:
            result_set.move_to_first()
            return self._get_table_rows(result_set, all_rows=True)

        return self._run(
            lambda: self._row_source.execute(self._database_path, statement, provide_result)
        )

    def get_content_page(self) -> List[MaterializedRow]:
        """
        Fetch the current page of the table.

        Returns:
            Header row followed by at most rows_per_page data rows

        Raises:
            DataAccessError: If the statement cannot be run; the paging
                             state is left untouched
        """
        statement = self._dialect.generate_select_query(
            self._table_name,
            order_by=self._order_by_column_name or None,
            sort_order=self._sort_order,
        )
        position = self._position

        def provide_result(result_set: ResultSet) -> Tuple[int, List[MaterializedRow]]:
            result_set.move_to_position(position)
            return result_set.row_count, self._get_table_rows(result_set, all_rows=False)

        count, rows = self._run(
            lambda: self._row_source.execute_page(
                self._database_path, statement, position, self._rows_per_page, provide_result
            )
        )
        self._count = count
        logger.debug(
            f"Page {self.get_current_page()}/{self.get_page_count()} of {self._table_name}: "
            f"{len(rows) - 1} rows from position {position}"
        )
        return rows

    def _run(self, fetch: Callable[[], T]) -> T:
        """Run a row source fetch, logging failures."""
        try:
            return fetch()
        except DataAccessError as e:
            logger.error(f"{e.info.format_short()} ({e})")
            raise

    # -------------------------------------------------------------------------
    # Row materialization
    # -------------------------------------------------------------------------

    def _get_header_row(self, result_set: ResultSet) -> MaterializedRow:
        labels = []
        for column_name in result_set.column_names:
            if column_name == self._order_by_column_name:
                glyph = SORT_ASC_GLYPH if self._sort_order is SortOrder.ASC else SORT_DESC_GLYPH
                labels.append(glyph + column_name)
            else:
                labels.append(column_name)
        return MaterializedRow(
            cells=labels, kind=RowKind.HEADER, keys=result_set.column_names
        )

    def _get_table_rows(self, result_set: ResultSet, all_rows: bool) -> List[MaterializedRow]:
        """
        Materialize the header and the rows from the cursor position on.

        Args:
            result_set: Result positioned on the first row to emit
            all_rows: Ignore the page size (metadata listings)
        """
        rows = [self._get_header_row(result_set)]
        shaded = False

        while result_set.is_on_row():
            if not all_rows and len(rows) > self._rows_per_page:
                break

            cells = []
            for col in range(result_set.column_count):
                if result_set.column_type(col) is ColumnType.BLOB:
                    cells.append(BLOB_PLACEHOLDER)
                else:
                    cells.append(result_set.get_string(col))

            rows.append(MaterializedRow(cells=cells, kind=RowKind.DATA, shaded=shaded))
            shaded = not shaded
            result_set.move_to_next()

        return rows

    # -------------------------------------------------------------------------
    # Paging
    # -------------------------------------------------------------------------

    def next_page(self):
        if self.has_next():
            self._position += self._rows_per_page

    def previous_page(self):
        if self.has_previous():
            self._position -= self._rows_per_page

    def has_next(self) -> bool:
        return self._position + self._rows_per_page < self._count

    def has_previous(self) -> bool:
        return self._position - self._rows_per_page >= 0

    def get_page_count(self) -> int:
        return math.ceil(self._count / self._rows_per_page)

    def get_current_page(self) -> int:
        """1-based number of the current page."""
        return self._position // self._rows_per_page + 1

    def reset_page(self):
        """Go back to the first page."""
        self._position = 0

    # -------------------------------------------------------------------------
    # Sorting
    # -------------------------------------------------------------------------

    def toggle_order_by_column(self, column_name: str):
        """
        Sort on a column, or flip the direction if it is already the sort column.

        Always returns to the first page. Passing "" restores natural order.
        """
        if column_name == self._order_by_column_name:
            self._sort_order = self._sort_order.toggle()
        else:
            self._order_by_column_name = column_name
            self._sort_order = DEFAULT_SORT_ORDER
        self.reset_page()

    # -------------------------------------------------------------------------
    # Header click notification
    # -------------------------------------------------------------------------

    @property
    def on_click_column_header_listener(self) -> Optional[ColumnHeaderListener]:
        return self._on_click_column_header_listener

    @on_click_column_header_listener.setter
    def on_click_column_header_listener(self, listener: Optional[ColumnHeaderListener]):
        self._on_click_column_header_listener = listener

    def click_column_header(self, column_name: str):
        """Report activation of a column header to the registered listener."""
        if self._on_click_column_header_listener is not None:
            self._on_click_column_header_listener(column_name)
