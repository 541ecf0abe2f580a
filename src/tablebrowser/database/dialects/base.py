"""
Base Database Dialect - Abstract base class for database-specific SQL text

Dialects handle database-specific syntax differences such as:
- Identifier quoting ([brackets] vs "quotes")
- System catalog queries (sys.* vs information_schema vs PRAGMA)
"""

from abc import ABC, abstractmethod
from typing import Optional

from ...core.models import PragmaType, SortOrder

import logging
logger = logging.getLogger(__name__)


class DatabaseDialect(ABC):
    """
    Abstract base class for database dialects.

    Each dialect knows how to:
    1. Quote/escape identifiers appropriately
    2. Generate a single-table scan with optional ordering
    3. Generate metadata (catalog) queries

    Usage:
        dialect = SQLiteDialect()
        query = dialect.generate_select_query("users", order_by="name")
    """

    # ==================== Identifier Quoting ====================

    @property
    @abstractmethod
    def quote_char(self) -> str:
        """Character used to quote identifiers (e.g., '"' or '[')."""
        pass

    @property
    def quote_char_end(self) -> str:
        """Closing quote character (same as quote_char for most databases)."""
        return self.quote_char

    def quote_identifier(self, identifier: str) -> str:
        """Quote a single identifier, doubling embedded closing quotes."""
        escaped = identifier.replace(self.quote_char_end, self.quote_char_end * 2)
        return f"{self.quote_char}{escaped}{self.quote_char_end}"

    # ==================== SELECT Query Generation ====================

    def generate_select_query(
        self,
        table_name: str,
        order_by: Optional[str] = None,
        sort_order: SortOrder = SortOrder.ASC
    ) -> str:
        """
        Generate a full-table SELECT.

        Args:
            table_name: Table or view name
            order_by: Column to sort on (None or "" = natural order)
            sort_order: Direction applied to order_by

        Returns:
            Complete SELECT statement
        """
        query = f"SELECT * FROM {self.quote_identifier(table_name)}"
        if order_by:
            query += f" ORDER BY {self.quote_identifier(order_by)} {sort_order.value}"
        return query

    def generate_count_query(self, query: str) -> str:
        """Wrap a SELECT so it returns its row count."""
        return f"SELECT COUNT(*) FROM ({query})"

    def apply_page_window(self, query: str) -> str:
        """
        Restrict a SELECT to one page.

        The returned statement takes two parameters: (limit, offset).
        """
        return f"{query} LIMIT ? OFFSET ?"

    # ==================== Metadata Queries ====================

    @abstractmethod
    def pragma_statement(self, pragma_type: PragmaType, table_name: str) -> Optional[str]:
        """
        Get the catalog query for a metadata listing.

        Args:
            pragma_type: Kind of metadata listing
            table_name: Table the listing is about

        Returns:
            Statement text, or None if the kind is not supported
        """
        pass
