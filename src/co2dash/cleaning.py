"""
Record normalization for raw emissions tables.

Raw rows come from CSV files whose headers differ between sources
("Entity"/"country"/"entity", "Annual CO₂ emissions"/"emissions"/"co2", ...).
Every logical field is resolved through an ordered alias list and the first
present value wins. Rows that cannot be parsed or fail validation are dropped
without raising; malformed historical rows are expected in these datasets.
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable, Mapping, Optional

import numpy as np
import pandas as pd

from .config import (
    AGGREGATE_ENTITIES,
    CODE_ALIASES,
    COUNTRY_NAME_MAPPINGS,
    EMISSIONS_ALIASES,
    ENTITY_ALIASES,
    MAX_YEAR,
    MIN_YEAR,
    UNKNOWN_ENTITY,
    WORLD_ENTITIES,
    YEAR_ALIASES,
)

log = logging.getLogger(__name__)

RECORD_COLUMNS = ["entity", "code", "year", "emissions"]
GLOBAL_COLUMNS = ["entity", "year", "emissions"]

DroppedHook = Optional[Callable[[int], None]]


def as_frame(rows: pd.DataFrame | Iterable[Mapping] | None) -> pd.DataFrame:
    if rows is None:
        return pd.DataFrame()
    if isinstance(rows, pd.DataFrame):
        return rows
    return pd.DataFrame(list(rows))


def _present(s: pd.Series) -> np.ndarray:
    # object copy with every missing value (null, NaN, "") as None
    values = np.array(s.to_numpy(dtype=object), dtype=object, copy=True)
    missing = pd.isna(values) | np.array([isinstance(v, str) and v == "" for v in values], dtype=bool)
    values[missing] = None
    return values


def resolve_alias(df: pd.DataFrame, aliases: Iterable[str]) -> pd.Series:
    out = np.full(len(df), None, dtype=object)
    for name in aliases:
        if name in df.columns:
            candidate = _present(df[name])
            fill = pd.isna(out) & ~pd.isna(candidate)
            out[fill] = candidate[fill]
    return pd.Series(out, index=df.index, dtype="object")


def _parse_fields(df: pd.DataFrame) -> pd.DataFrame:
    entity = resolve_alias(df, ENTITY_ALIASES)
    year_raw = resolve_alias(df, YEAR_ALIASES)
    emissions_raw = resolve_alias(df, EMISSIONS_ALIASES)
    admitted = entity.notna() & year_raw.notna() & emissions_raw.notna()

    # integer parse truncates fractional years ("1990.0" -> 1990)
    year = np.trunc(pd.to_numeric(year_raw, errors="coerce").astype("float64"))
    emissions = pd.to_numeric(emissions_raw, errors="coerce").astype("float64")

    return pd.DataFrame({
        "entity": entity,
        "code": resolve_alias(df, CODE_ALIASES),
        "year": year,
        "emissions": emissions,
        "admitted": admitted,
    }, index=df.index)


def _report_dropped(kind: str, total: int, kept: int, on_dropped: DroppedHook) -> None:
    dropped = total - kept
    log.debug("%s: kept %d of %d rows (%d dropped)", kind, kept, total, dropped)
    if on_dropped is not None:
        on_dropped(dropped)


def normalize(raw_rows, on_dropped: DroppedHook = None) -> pd.DataFrame:
    """
    Map raw per-country rows onto ``entity, code, year, emissions`` records.

    A row is kept when entity, year and emissions are all present, both numbers
    parse, ``emissions >= 0`` and ``MIN_YEAR <= year <= MAX_YEAR``. Output is
    sorted by year; rows sharing a year keep their input order. ``on_dropped``
    receives the number of discarded rows.
    """
    df = as_frame(raw_rows)
    p = _parse_fields(df)
    valid = (p["admitted"] & p["emissions"].notna() & (p["emissions"] >= 0)
             & p["year"].between(MIN_YEAR, MAX_YEAR))
    p = p[valid]

    out = pd.DataFrame({
        "entity": p["entity"].fillna(UNKNOWN_ENTITY).astype(str),
        "code": p["code"].fillna("").astype(str),
        "year": p["year"].astype("int64"),
        "emissions": p["emissions"].astype("float64"),
    }, columns=RECORD_COLUMNS)
    out = out.sort_values("year", kind="stable").reset_index(drop=True)

    _report_dropped("normalize", len(df), len(out), on_dropped)
    return out


def extract_global(raw_rows, entities: Iterable[str] = WORLD_ENTITIES,
                   on_dropped: DroppedHook = None) -> pd.DataFrame:
    """
    Keep only world-aggregate rows (exact, case-sensitive entity match).

    Same alias resolution as ``normalize``; there is no year floor because world
    series can start before 1750.
    """
    df = as_frame(raw_rows)
    p = _parse_fields(df)
    is_world = p["entity"].isin(frozenset(entities))
    valid = (p["admitted"] & is_world
             & (p["year"].abs() <= MAX_YEAR) & np.isfinite(p["emissions"])
             & (p["emissions"] >= 0))
    p = p[valid]

    out = pd.DataFrame({
        "entity": p["entity"].astype(str),
        "year": p["year"].astype("int64"),
        "emissions": p["emissions"].astype("float64"),
    }, columns=GLOBAL_COLUMNS)
    out = out.sort_values("year", kind="stable").reset_index(drop=True)

    _report_dropped("extract_global", len(df), len(out), on_dropped)
    return out


def drop_aggregates(records: pd.DataFrame,
                    entities: Iterable[str] = AGGREGATE_ENTITIES) -> pd.DataFrame:
    """Remove continent/world/economic-group rows, leaving real countries."""
    keep = ~records["entity"].isin(frozenset(entities))
    return records[keep].reset_index(drop=True)


def normalize_country_names(records: pd.DataFrame,
                            mappings: Mapping[str, str] = COUNTRY_NAME_MAPPINGS) -> pd.DataFrame:
    out = records.copy()
    out["entity"] = out["entity"].map(lambda name: mappings.get(name, name))
    return out
