from __future__ import annotations

import pandas as pd


def percentages(counts: pd.Series) -> pd.Series:
    """
    Share of the total per row, in percent rounded to 2 decimals.
    An all-zero series stays at 0.0.
    """
    total = counts.sum()
    if total == 0:
        return counts.astype(float)
    return (counts / total * 100).round(2)
