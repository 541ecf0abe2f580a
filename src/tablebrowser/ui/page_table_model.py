"""
Page Table Model for the table browser.

Provides a QAbstractTableModel over one materialized page. The model
only displays what the engine produced; header clicks are handed back to
the engine, which notifies its listener (typically a controller that
toggles the sort column and refreshes).
"""
from typing import Any, List, Optional, Sequence

from PySide6.QtCore import Qt, QAbstractTableModel, QModelIndex
from PySide6.QtGui import QColor

import pandas as pd

from ..constants import SHADED_ROW_COLOR, SORT_COLUMN_HEADER_COLOR
from ..core.models import MaterializedRow
from ..core.page_frame import page_to_dataframe, shaded_mask
from ..core.table_view import TableView

import logging
logger = logging.getLogger(__name__)


class PageTableModel(QAbstractTableModel):
    """
    Read-only QAbstractTableModel for a table view page.

    Usage:
        model = PageTableModel(table_view)
        view.setModel(model)
        view.horizontalHeader().sectionClicked.connect(model.on_header_section_clicked)
        model.refresh()
    """

    def __init__(self, table_view: TableView, parent=None):
        super().__init__(parent)
        self._table_view = table_view
        self._dataframe: pd.DataFrame = pd.DataFrame()
        self._labels: List[str] = []
        self._keys: List[str] = []
        self._shaded: List[bool] = []
        self._first_row_number = 0

    @property
    def table_view(self) -> TableView:
        return self._table_view

    @property
    def dataframe(self) -> pd.DataFrame:
        """Get the DataFrame of the displayed page."""
        return self._dataframe

    def set_rows(self, rows: Sequence[MaterializedRow], first_row_number: int = 0) -> None:
        """
        Display a page.

        Args:
            rows: Header row followed by data rows
            first_row_number: Absolute index of the first data row
        """
        self.beginResetModel()
        self._dataframe = page_to_dataframe(rows)
        self._labels = list(rows[0].cells) if rows else []
        self._keys = list(rows[0].keys or rows[0].cells) if rows else []
        self._shaded = shaded_mask(rows)
        self._first_row_number = first_row_number
        self.endResetModel()

    def refresh(self) -> None:
        """Fetch the engine's current page and display it."""
        rows = self._table_view.get_content_page()
        self.set_rows(rows, self._table_view.position)

    def clear(self) -> None:
        """Clear the model data."""
        self.beginResetModel()
        self._dataframe = pd.DataFrame()
        self._labels = []
        self._keys = []
        self._shaded = []
        self._first_row_number = 0
        self.endResetModel()

    # -------------------------------------------------------------------------
    # QAbstractTableModel interface
    # -------------------------------------------------------------------------

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self._dataframe)

    def columnCount(self, parent: QModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self._labels)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if not index.isValid():
            return None

        row = index.row()
        col = index.column()
        if row < 0 or row >= self.rowCount() or col < 0 or col >= self.columnCount():
            return None

        if role == Qt.ItemDataRole.DisplayRole:
            return self._dataframe.iat[row, col]

        elif role == Qt.ItemDataRole.BackgroundRole:
            if self._shaded[row]:
                return QColor(SHADED_ROW_COLOR)

        return None

    def headerData(self, section: int, orientation: Qt.Orientation,
                   role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if role == Qt.ItemDataRole.ForegroundRole:
            if (orientation == Qt.Orientation.Horizontal
                    and self.column_name(section) is not None
                    and self.column_name(section) == self._table_view.order_by_column_name):
                return QColor(SORT_COLUMN_HEADER_COLOR)
            return None

        if role != Qt.ItemDataRole.DisplayRole:
            return None

        if orientation == Qt.Orientation.Horizontal:
            if 0 <= section < len(self._labels):
                return self._labels[section]
        else:
            # Absolute row numbers (1-based for user display)
            return str(self._first_row_number + section + 1)

        return None

    def flags(self, index: QModelIndex) -> Qt.ItemFlag:
        """Return item flags (read-only)."""
        if not index.isValid():
            return Qt.ItemFlag.NoItemFlags
        return Qt.ItemFlag.ItemIsEnabled | Qt.ItemFlag.ItemIsSelectable

    # -------------------------------------------------------------------------
    # Header clicks
    # -------------------------------------------------------------------------

    def column_name(self, section: int) -> Optional[str]:
        """Raw column name behind a header section."""
        if 0 <= section < len(self._keys):
            return self._keys[section]
        return None

    def on_header_section_clicked(self, section: int) -> None:
        """Slot for QHeaderView.sectionClicked."""
        column_name = self.column_name(section)
        if column_name is None:
            return
        self._table_view.click_column_header(column_name)
