"""
Top-N listings over normalized country records and world series.

Descending sorts are stable: rows with equal emissions stay in input order.
"""
from __future__ import annotations

from typing import Optional

import numpy as np
import pandas as pd

from .aggregate import pct_change
from .config import TOP_COUNTRIES_LIMIT, TOP_YEARS_LIMIT

RANK_COLUMNS = ["country", "emissions", "code"]
COUNTRY_RANK_COLUMNS = RANK_COLUMNS + ["growth", "global_rank"]
CONTAMINATED_COLUMNS = ["rank", "year", "emissions", "entity"]


def check_limit(limit) -> int:
    if isinstance(limit, bool) or not isinstance(limit, (int, np.integer)):
        raise ValueError(f"limit must be an integer, got {limit!r}")
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    return int(limit)


def sort_desc(df: pd.DataFrame, col: str = "emissions") -> pd.DataFrame:
    order = np.argsort(-df[col].to_numpy(dtype="float64"), kind="stable")
    return df.iloc[order]


def get_country_with_growth(records: pd.DataFrame, country: str, year: int) -> Optional[dict]:
    """
    Emissions of ``country`` in ``year`` plus growth vs. the previous year and
    the 1-based global rank among all records of that year. None if the country
    has no record for ``year``.
    """
    own = records[records["entity"] == country]
    current = own[own["year"] == year]
    if current.empty:
        return None
    cur = current.iloc[0]
    previous = own[own["year"] == year - 1]
    prev_emissions = float(previous.iloc[0]["emissions"]) if not previous.empty else None

    ranked = sort_desc(records[records["year"] == year])
    hits = np.flatnonzero(ranked["entity"].to_numpy() == country)
    return {
        "entity": str(cur["entity"]),
        "code": str(cur["code"]),
        "year": int(cur["year"]),
        "emissions": float(cur["emissions"]),
        "growth": pct_change(float(cur["emissions"]), prev_emissions),
        "global_rank": int(hits[0]) + 1 if len(hits) else None,
    }


def get_top_countries(records: pd.DataFrame, year: int, limit: int = TOP_COUNTRIES_LIMIT,
                      specific_country: Optional[str] = None) -> pd.DataFrame:
    if specific_country is not None:
        row = get_country_with_growth(records, specific_country, year)
        if row is None:
            return pd.DataFrame(columns=COUNTRY_RANK_COLUMNS)
        return pd.DataFrame([{
            "country": row["entity"],
            "emissions": row["emissions"],
            "code": row["code"],
            "growth": row["growth"],
            "global_rank": row["global_rank"],
        }], columns=COUNTRY_RANK_COLUMNS)

    limit = check_limit(limit)
    top = sort_desc(records[records["year"] == year]).head(limit)
    top = top.rename(columns={"entity": "country"})
    return top[RANK_COLUMNS].reset_index(drop=True)


def get_top_contaminated_years(global_records: pd.DataFrame,
                               limit: int = TOP_YEARS_LIMIT) -> pd.DataFrame:
    limit = check_limit(limit)
    top = sort_desc(global_records).head(limit).reset_index(drop=True)
    top.insert(0, "rank", np.arange(1, len(top) + 1, dtype="int64"))
    return top[CONTAMINATED_COLUMNS]


def get_most_contaminated_year(global_records: pd.DataFrame) -> Optional[dict]:
    if global_records is None or global_records.empty:
        return None
    # argmax returns the first maximum
    row = global_records.iloc[int(np.argmax(global_records["emissions"].to_numpy()))]
    return {
        "entity": str(row["entity"]),
        "year": int(row["year"]),
        "emissions": float(row["emissions"]),
    }
