#!/usr/bin/env python
# -*- coding: utf-8 -*-
from __future__ import annotations

import argparse, json
from pathlib import Path

from co2dash.aggregate import aggregate_by_year, filter_by_year_range, with_variation
from co2dash.cleaning import normalize
from co2dash.loaders import DatasetLoadError, load_any, save_any
from co2dash.logging_config import setup_logging

def main():
    ap = argparse.ArgumentParser(description="Yearly emission totals with year-over-year variation (%).")
    ap.add_argument("--input", required=True, help="Country records (raw or cleaned; headers are resolved by alias)")
    ap.add_argument("--output", required=True, help="Output file (.csv or .parquet)")
    ap.add_argument("--start_year", type=int, default=None, help="Inclusive start year")
    ap.add_argument("--end_year", type=int, default=None, help="Inclusive end year")
    ap.add_argument("--country", default=None, help="Restrict totals to a single entity")
    ap.add_argument("--log_config", default=None)
    ap.add_argument("--log_dir", default=None)
    args = ap.parse_args()

    setup_logging(args.log_config, log_dir=args.log_dir)
    try:
        records = normalize(load_any(Path(args.input)))
    except DatasetLoadError as e:
        raise SystemExit(f"[ERROR] {e}")

    if len(records) and (args.start_year is not None or args.end_year is not None):
        y0 = args.start_year if args.start_year is not None else int(records["year"].min())
        y1 = args.end_year if args.end_year is not None else int(records["year"].max())
        if y0 > y1:
            print(f"[WARN] inverted year range {y0}-{y1}: no rows selected")
        records = filter_by_year_range(records, y0, y1)
    if args.country:
        records = records[records["entity"] == args.country]

    trends = with_variation(aggregate_by_year(records))
    out = save_any(trends, args.output)

    meta = {
        "input": args.input,
        "country": args.country,
        "year_range": [args.start_year, args.end_year],
        "records": int(len(records)),
        "years": int(len(trends)),
        "latest_variation": float(trends["variation"].iloc[-1]) if len(trends) else None,
    }
    print("[OK] yearly trends written:", str(out))
    print(json.dumps(meta, indent=2))

if __name__ == "__main__":
    main()
