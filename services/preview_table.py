"""
Tabular views of import rows for the preview grid.
"""

from typing import Iterable, List

import pandas as pd

from models import ImportRow

PREVIEW_COLUMNS = ["id", "term", "meaning", "confidence", "status", "source_line"]


def rows_to_dataframe(rows: Iterable[ImportRow]) -> pd.DataFrame:
    """
    Convert rows to a DataFrame in row order.
    
    Args:
        rows: Rows to convert
    
    Returns:
        DataFrame with PREVIEW_COLUMNS (empty, with columns, when no rows)
    """
    records = [
        {
            "id": row.id,
            "term": row.term,
            "meaning": row.meaning,
            "confidence": round(row.confidence, 2),
            "status": row.status.value,
            "source_line": row.source_line,
        }
        for row in rows
    ]
    return pd.DataFrame(records, columns=PREVIEW_COLUMNS)


def status_summary(rows: Iterable[ImportRow]) -> pd.Series:
    """Row count per status, always listing all three statuses."""
    df = rows_to_dataframe(rows)
    counts = df["status"].value_counts()
    return counts.reindex(["confirmed", "candidate", "unclassified"], fill_value=0)


def row_ids(df: pd.DataFrame) -> List[str]:
    """Row ids in display order."""
    if df is None or df.empty:
        return []
    return df["id"].astype(str).tolist()
