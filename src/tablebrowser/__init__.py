"""
Table Browser - Paged, sortable, read-only browsing of SQLite tables
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("table-browser")
except PackageNotFoundError:
    # Package not installed
    __version__ = "0.1.0"

from .core.models import MaterializedRow, PragmaType, RowKind, SortOrder
from .core.table_view import TableView
from .errors import ConfigurationError, DataAccessError, TableBrowserError

__all__ = [
    "TableView",
    "MaterializedRow",
    "PragmaType",
    "RowKind",
    "SortOrder",
    "TableBrowserError",
    "DataAccessError",
    "ConfigurationError",
    "__version__",
]
