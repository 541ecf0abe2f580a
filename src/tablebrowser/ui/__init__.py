"""
UI - PySide6 renderer adapters for table pages
"""

from .page_table_model import PageTableModel

__all__ = ["PageTableModel"]
