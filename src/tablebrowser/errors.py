"""
Exception taxonomy for Table Browser.

- DataAccessError: database file missing/corrupt, invalid statement
- ConfigurationError: malformed preference value
"""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .utils.error_handler import DataAccessErrorInfo


class TableBrowserError(Exception):
    """Base class for all Table Browser errors."""


class DataAccessError(TableBrowserError):
    """
    Raised when a statement cannot be run against the database file.

    The original driver exception is chained as ``__cause__``.
    """

    def __init__(self, message: str, statement: Optional[str] = None,
                 database_path: Optional[str] = None):
        super().__init__(message)
        self.statement = statement
        self.database_path = database_path

    @property
    def info(self) -> "DataAccessErrorInfo":
        """User-friendly description of the failure."""
        from .utils.error_handler import parse_data_access_error
        return parse_data_access_error(self.__cause__ or self)


class ConfigurationError(TableBrowserError):
    """Raised when a stored preference has an unusable value."""

    def __init__(self, message: str, key: Optional[str] = None, value=None):
        super().__init__(message)
        self.key = key
        self.value = value
