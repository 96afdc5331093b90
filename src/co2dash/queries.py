"""
Query views over normalized records, shaped like the emissions API results
(lower-case ``entity, code, year, emissions`` columns).

Parameters may arrive as querystring text; ``parse_int_param`` turns them into
integers and rejects anything non-numeric with ``ValueError``.
"""
from __future__ import annotations

import pandas as pd

from .aggregate import aggregate_by_year
from .config import DEFAULT_QUERY_YEAR, TOP_COUNTRIES_LIMIT, TRENDS_SINCE
from .ranking import check_limit, get_top_countries


def parse_int_param(value, name: str, default: int | None = None) -> int | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def select_emissions(records: pd.DataFrame, year=None, country: str | None = None,
                     limit=None) -> pd.DataFrame:
    year = parse_int_param(year, "year")
    limit = parse_int_param(limit, "limit")
    out = records
    if year is not None:
        out = out[out["year"] == year]
    if country:
        out = out[out["entity"] == country]
    out = out.sort_values(["year", "entity"], kind="stable").reset_index(drop=True)
    if limit is not None:
        out = out.head(check_limit(limit))
    return out


def global_trends(records: pd.DataFrame, since=TRENDS_SINCE) -> pd.DataFrame:
    since = parse_int_param(since, "since", TRENDS_SINCE)
    return aggregate_by_year(records[records["year"] >= since])


def top_countries(records: pd.DataFrame, year=DEFAULT_QUERY_YEAR,
                  limit=TOP_COUNTRIES_LIMIT) -> pd.DataFrame:
    year = parse_int_param(year, "year", DEFAULT_QUERY_YEAR)
    limit = parse_int_param(limit, "limit", TOP_COUNTRIES_LIMIT)
    top = get_top_countries(records, year, limit)
    return top.rename(columns={"country": "entity"})[["entity", "code", "emissions"]]


def country_series(records: pd.DataFrame, name: str, since=TRENDS_SINCE) -> pd.DataFrame:
    since = parse_int_param(since, "since", TRENDS_SINCE)
    out = records[(records["entity"] == name) & (records["year"] >= since)]
    return out.sort_values("year", kind="stable")[["year", "emissions"]].reset_index(drop=True)


def available_years(records: pd.DataFrame) -> list[int]:
    return sorted((int(y) for y in records["year"].unique()), reverse=True)


def available_countries(records: pd.DataFrame) -> list[str]:
    return sorted(str(e) for e in records["entity"].unique())
