"""
Core value types shared by the table view engine and its renderers.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class SortOrder(Enum):
    """Direction of the ORDER BY clause."""
    ASC = "ASC"
    DESC = "DESC"

    def toggle(self) -> "SortOrder":
        return SortOrder.ASC if self is SortOrder.DESC else SortOrder.DESC


class PragmaType(Enum):
    """Metadata listings available for a table."""
    FOREIGN_KEY = "foreign_key"
    INDEX_LIST = "index_list"
    TABLE_INFO = "table_info"


class RowKind(Enum):
    HEADER = "header"
    DATA = "data"


@dataclass
class MaterializedRow:
    """
    One display-ready row of a page.

    Attributes:
        cells: Cell texts (header labels or stringified values)
        kind: HEADER or DATA
        shaded: Alternate-row rendering hint (data rows only)
        keys: Raw column names, set on header rows so a click on a
              decorated label can be reported by column name
    """
    cells: List[str]
    kind: RowKind = RowKind.DATA
    shaded: bool = False
    keys: List[str] = field(default_factory=list)

    @property
    def is_header(self) -> bool:
        return self.kind is RowKind.HEADER

    def __len__(self) -> int:
        return len(self.cells)
