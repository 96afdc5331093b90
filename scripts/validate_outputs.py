#!/usr/bin/env python
# -*- coding: utf-8 -*-
from __future__ import annotations

import argparse, json
from datetime import datetime, timezone
from pathlib import Path

import numpy as np
import pandas as pd

from co2dash.cleaning import GLOBAL_COLUMNS, RECORD_COLUMNS
from co2dash.aggregate import TOTAL_COLUMNS
from co2dash.config import MIN_YEAR
from co2dash.loaders import DatasetLoadError, load_any
from co2dash.logging_config import setup_logging

def check(rows: list, name: str, src: str, passed: bool, detail: str = "") -> None:
    rows.append({"file": src, "check": name, "passed": bool(passed), "detail": detail})

def check_columns(rows, df, cols, src) -> bool:
    missing = [c for c in cols if c not in df.columns]
    check(rows, "columns_present", src, not missing, f"missing: {missing}" if missing else "")
    return not missing

def check_records(rows, df, src):
    if not check_columns(rows, df, RECORD_COLUMNS, src):
        return
    check(rows, "entity_not_null", src, df["entity"].notna().all(), f"{int(df['entity'].isna().sum())} null")
    check(rows, f"year_ge_{MIN_YEAR}", src, (df["year"] >= MIN_YEAR).all(), f"min year {df['year'].min()}")
    check(rows, "emissions_non_negative", src, (df["emissions"] >= 0).all(), f"min {df['emissions'].min()}")
    check(rows, "sorted_by_year", src, df["year"].is_monotonic_increasing)

def check_world(rows, df, src):
    if not check_columns(rows, df, GLOBAL_COLUMNS, src):
        return
    check(rows, "emissions_finite_non_negative", src,
          bool(np.isfinite(df["emissions"]).all() and (df["emissions"] >= 0).all()))
    check(rows, "sorted_by_year", src, df["year"].is_monotonic_increasing)

def check_trends(rows, df, src):
    if not check_columns(rows, df, TOTAL_COLUMNS, src):
        return
    check(rows, "years_unique_ascending", src,
          df["year"].is_monotonic_increasing and df["year"].is_unique)
    if "variation" in df.columns and len(df):
        check(rows, "first_variation_zero", src, float(df["variation"].iloc[0]) == 0.0)
        check(rows, "variation_finite", src, bool(np.isfinite(df["variation"]).all()))

def main():
    ap = argparse.ArgumentParser(description="Validate pipeline outputs against the record invariants.")
    ap.add_argument("--records", required=True, help="Cleaned country records (.csv|.parquet)")
    ap.add_argument("--world", required=False, help="World series from extract_global_series.py")
    ap.add_argument("--trends", required=False, help="Yearly trends from build_yearly_trends.py")
    ap.add_argument("--report_csv", required=True, help="Output CSV with one row per check")
    ap.add_argument("--report_json", required=True, help="Output JSON with summary")
    ap.add_argument("--log_config", default=None)
    ap.add_argument("--log_dir", default=None)
    args = ap.parse_args()

    setup_logging(args.log_config, log_dir=args.log_dir)
    rows = []
    try:
        check_records(rows, load_any(Path(args.records)), args.records)
        if args.world:
            check_world(rows, load_any(Path(args.world)), args.world)
        if args.trends:
            check_trends(rows, load_any(Path(args.trends)), args.trends)
    except DatasetLoadError as e:
        raise SystemExit(f"[ERROR] {e}")

    report = pd.DataFrame(rows)
    out_csv = Path(args.report_csv)
    out_csv.parent.mkdir(parents=True, exist_ok=True)
    report.to_csv(out_csv, index=False)

    failed = report.loc[~report["passed"], "check"].tolist()
    meta = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "records_file": args.records,
        "world_file": args.world if args.world else None,
        "trends_file": args.trends if args.trends else None,
        "checks": int(len(report)),
        "failed": failed,
    }
    Path(args.report_json).parent.mkdir(parents=True, exist_ok=True)
    with open(args.report_json, "w", encoding="utf-8") as f:
        json.dump(meta, f, indent=2)

    print("[OK] validation written:", str(out_csv))
    print(json.dumps(meta, indent=2))
    if failed:
        raise SystemExit(1)

if __name__ == "__main__":
    main()
