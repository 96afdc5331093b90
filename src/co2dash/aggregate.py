from __future__ import annotations

import numpy as np
import pandas as pd

TOTAL_COLUMNS = ["year", "total_emissions"]


def aggregate_by_year(records: pd.DataFrame) -> pd.DataFrame:
    """Sum emissions per year; one row per distinct year, ascending."""
    if records.empty:
        return pd.DataFrame({"year": pd.Series(dtype="int64"),
                             "total_emissions": pd.Series(dtype="float64")})
    totals = (records.groupby("year", as_index=False, sort=True)["emissions"]
                     .sum()
                     .rename(columns={"emissions": "total_emissions"}))
    totals["year"] = totals["year"].astype("int64")
    totals["total_emissions"] = totals["total_emissions"].astype("float64")
    return totals[TOTAL_COLUMNS]


def pct_change(current: float, previous: float | None) -> float:
    """Percentage change rounded to 2 decimals; 0 when there is no usable base."""
    if previous is None or not previous > 0:
        return 0.0
    return round((current - previous) / previous * 100, 2)


def with_variation(totals: pd.DataFrame) -> pd.DataFrame:
    """
    Attach the year-over-year percentage change of ``total_emissions``.

    Rows are taken in the given order (expected ascending by year). The first row
    and any row whose predecessor total is 0 get a variation of 0.
    """
    out = totals.copy()
    cur = out["total_emissions"].to_numpy(dtype="float64")
    prev = np.roll(cur, 1)
    base = np.isfinite(prev) & (prev > 0)
    base[:1] = False
    with np.errstate(divide="ignore", invalid="ignore"):
        change = np.where(base, (cur - prev) / np.where(base, prev, 1.0) * 100, 0.0)
    out["variation"] = np.round(change, 2) + 0.0  # no -0.0
    return out


def filter_by_year_range(records: pd.DataFrame, start_year: int, end_year: int) -> pd.DataFrame:
    """Inclusive on both ends; an inverted range gives an empty frame."""
    mask = (records["year"] >= start_year) & (records["year"] <= end_year)
    return records[mask].copy()


def country_data(records: pd.DataFrame, country: str) -> pd.DataFrame:
    out = records[records["entity"] == country]
    return out.sort_values("year", kind="stable").reset_index(drop=True)


def data_for_year(records: pd.DataFrame, year: int) -> pd.DataFrame:
    return records[records["year"] == year].reset_index(drop=True)
