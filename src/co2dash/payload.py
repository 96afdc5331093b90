from __future__ import annotations

import pandas as pd

from .config import EMISSIONS_UNITS

CLIP_QUANTILES = (0.01, 0.99)


def build_map_payload(records: pd.DataFrame, clip_quantiles: tuple[float, float] = CLIP_QUANTILES,
                      decimals: int = 2) -> dict:
    """Per-year ``{entity: emissions}`` lookup for the world map, JSON-ready."""
    df = records[records["emissions"] > 0]
    years = sorted(df["year"].dropna().astype(int).unique().tolist())
    years_str = [str(y) for y in years]
    values = {}
    for y in years:
        sub = df[df["year"] == y]
        values[str(y)] = {str(c): float(v) for c, v in zip(sub["entity"], sub["emissions"].round(decimals))}
    if df.empty:
        clip = (0.0, 0.0)
    else:
        q_lo, q_hi = df["emissions"].quantile(list(clip_quantiles)).tolist()
        clip = (float(round(q_lo, decimals)), float(round(q_hi, decimals)))
    return {
        "years": years_str,
        "values": values,
        "clip": clip,
        "units": EMISSIONS_UNITS,
        "default_year": years_str[-1] if years_str else None,
    }
