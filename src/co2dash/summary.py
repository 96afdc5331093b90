"""
Headline figures for the dashboard: KPI cards, dataset info and per-year map stats.
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional

import pandas as pd

from .aggregate import aggregate_by_year, filter_by_year_range, with_variation
from .config import KPI_TOP_N
from .ranking import get_most_contaminated_year, get_top_countries


def format_emissions(value: float) -> str:
    if value >= 1e12: return f"{value / 1e12:.2f}T"
    if value >= 1e9: return f"{value / 1e9:.2f}B"
    if value >= 1e6: return f"{value / 1e6:.2f}M"
    return f"{value:.2f}"


def kpi_summary(records: pd.DataFrame, start_year: Optional[int] = None,
                end_year: Optional[int] = None, country: Optional[str] = None,
                top_n: int = KPI_TOP_N, fallback_year: Optional[int] = None) -> dict:
    """
    Latest-year totals for the current filter selection.

    The year range and country narrow the aggregate; the top emitters are always
    ranked over the full record set for the latest filtered year.
    """
    filtered = records
    if not records.empty and (start_year is not None or end_year is not None):
        lo = int(records["year"].min()) if start_year is None else start_year
        hi = int(records["year"].max()) if end_year is None else end_year
        filtered = filter_by_year_range(filtered, lo, hi)
    if country:
        filtered = filtered[filtered["entity"] == country]

    totals = with_variation(aggregate_by_year(filtered))
    if totals.empty:
        latest_year = fallback_year if fallback_year is not None else datetime.now().year - 1
        global_emissions = 0.0
        variation = 0.0
    else:
        last = totals.iloc[-1]
        latest_year = int(last["year"])
        global_emissions = float(last["total_emissions"])
        variation = float(last["variation"])

    top = get_top_countries(records, latest_year, top_n)
    top_sum = float(top["emissions"].sum()) if not top.empty else 0.0
    share = round(top_sum / global_emissions * 100, 1) if global_emissions > 0 and not top.empty else 0.0

    return {
        "latest_year": latest_year,
        "global_emissions": global_emissions,
        "yearly_variation": variation,
        "top_emitter": str(top.iloc[0]["country"]) if not top.empty else None,
        "top_emitter_emissions": float(top.iloc[0]["emissions"]) if not top.empty else 0.0,
        "top_share_pct": share,
        "top_countries": top.to_dict(orient="records"),
    }


def dataset_info(records: pd.DataFrame) -> dict:
    return {
        "records": int(len(records)),
        "entities": int(records["entity"].nunique()) if not records.empty else 0,
        "first_year": int(records["year"].min()) if not records.empty else None,
        "last_year": int(records["year"].max()) if not records.empty else None,
    }


def global_info(global_records: pd.DataFrame) -> dict:
    info = {
        "years": int(len(global_records)),
        "first_year": int(global_records["year"].min()) if not global_records.empty else None,
        "last_year": int(global_records["year"].max()) if not global_records.empty else None,
    }
    info["most_contaminated"] = get_most_contaminated_year(global_records)
    return info


def year_stats(records: pd.DataFrame, year: int) -> dict:
    sub = records[records["year"] == year]
    return {
        "year": int(year),
        "countries": int(sub["entity"].nunique()),
        "records": int(len(sub)),
        "max_emissions": float(sub["emissions"].max()) if not sub.empty else None,
        "min_emissions": float(sub["emissions"].min()) if not sub.empty else None,
    }
