"""
Configuration - read-only user preferences
"""

from .user_preferences import UserPreferences, get_rows_per_page

__all__ = ["UserPreferences", "get_rows_per_page"]
