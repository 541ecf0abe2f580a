"""
SQLite Dialect - SQLite-specific SQL text
"""

from typing import Optional

from .base import DatabaseDialect
from ...core.models import PragmaType

import logging
logger = logging.getLogger(__name__)


class SQLiteDialect(DatabaseDialect):
    """Dialect for SQLite databases."""

    PRAGMA_FORMATS = {
        PragmaType.FOREIGN_KEY: "PRAGMA foreign_key_list({table})",
        PragmaType.INDEX_LIST: "PRAGMA index_list({table})",
        PragmaType.TABLE_INFO: "PRAGMA table_info({table})",
    }

    @property
    def quote_char(self) -> str:
        return '"'

    def pragma_statement(self, pragma_type: PragmaType, table_name: str) -> Optional[str]:
        """Build the PRAGMA text for a metadata listing."""
        pragma_format = self.PRAGMA_FORMATS.get(pragma_type)
        if pragma_format is None:
            return None
        return pragma_format.format(table=self.quote_identifier(table_name))
