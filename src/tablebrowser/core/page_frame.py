"""
Page Frame - Convert a materialized page to a pandas DataFrame.

The DataFrame is the pivot format renderers and exporters consume:
header keys become the columns, data rows keep their display text.
"""

import logging
from typing import List, Sequence

import pandas as pd

from .models import MaterializedRow

logger = logging.getLogger(__name__)


def page_to_dataframe(rows: Sequence[MaterializedRow]) -> pd.DataFrame:
    """
    Build a DataFrame from a header row and its data rows.

    Args:
        rows: Output of TableView.get_content_page() or get_by_pragma()

    Returns:
        DataFrame with one string column per header key (empty when
        rows is empty)
    """
    if not rows:
        return pd.DataFrame()

    header, data_rows = rows[0], rows[1:]
    if not header.is_header:
        raise ValueError("First row of a page must be the header row")

    columns: List[str] = header.keys or header.cells
    df = pd.DataFrame([row.cells for row in data_rows], columns=columns, dtype=object)
    logger.debug(f"Page frame: {len(df)} rows x {len(columns)} columns")
    return df


def shaded_mask(rows: Sequence[MaterializedRow]) -> List[bool]:
    """Alternate-row hints of the data rows of a page, in order."""
    return [row.shaded for row in rows if not row.is_header]
