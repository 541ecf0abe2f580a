"""
Centralized constants for Table Browser.

Import from here instead of hardcoding values.
"""

# ===========================================================================
# Paging
# ===========================================================================
DEFAULT_ROWS_PER_PAGE = 10
PREF_KEY_ROWS_PER_PAGE = "rows_per_page"

# ===========================================================================
# Cell / header display
# ===========================================================================
BLOB_PLACEHOLDER = "(data)"     # Shown instead of binary column content
NULL_DISPLAY = ""

# Prepended (not appended) so the marker survives a truncated column width
SORT_ASC_GLYPH = "↑ "
SORT_DESC_GLYPH = "↓ "

# ===========================================================================
# Renderer hints
# ===========================================================================
SHADED_ROW_COLOR = "#f0f0f0"
SORT_COLUMN_HEADER_COLOR = "#0052cc"
