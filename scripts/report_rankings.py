#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Markdown report of the dashboard figures:
KPI summary, top emitting countries for a year (or one country with growth and
global rank), the most contaminated years of the world series.
"""
from __future__ import annotations

import argparse
from pathlib import Path

from co2dash.cleaning import extract_global, normalize
from co2dash.config import KPI_TOP_N, TOP_COUNTRIES_LIMIT, TOP_YEARS_LIMIT
from co2dash.loaders import DatasetLoadError, load_any
from co2dash.logging_config import setup_logging
from co2dash.ranking import get_most_contaminated_year, get_top_contaminated_years, get_top_countries
from co2dash.summary import dataset_info, format_emissions, global_info, kpi_summary

def main():
    ap = argparse.ArgumentParser(description="Rankings report (top countries, top contaminated years, KPIs).")
    ap.add_argument("--countries", required=True, help="Per-country file (raw or cleaned)")
    ap.add_argument("--world", default=None, help="World file with World/OWID_WRL rows (optional)")
    ap.add_argument("--year", type=int, default=None, help="Ranking year (default: latest year in the data)")
    ap.add_argument("--country", default=None, help="Report a single country with growth and global rank")
    ap.add_argument("--limit", type=int, default=TOP_COUNTRIES_LIMIT)
    ap.add_argument("--years_limit", type=int, default=TOP_YEARS_LIMIT)
    ap.add_argument("--out_md", required=True)
    ap.add_argument("--log_config", default=None)
    ap.add_argument("--log_dir", default=None)
    args = ap.parse_args()
    if args.limit < 0 or args.years_limit < 0:
        raise SystemExit("--limit and --years_limit must be >= 0")

    setup_logging(args.log_config, log_dir=args.log_dir)
    try:
        records = normalize(load_any(Path(args.countries)))
        world = extract_global(load_any(Path(args.world))) if args.world else None
    except DatasetLoadError as e:
        raise SystemExit(f"[ERROR] {e}")

    info = dataset_info(records)
    year = args.year if args.year is not None else info["last_year"]
    kpi = kpi_summary(records, top_n=KPI_TOP_N)

    lines = ["# CO₂ emissions – rankings", ""]
    lines.append(f"- Records: **{info['records']}**, entities: **{info['entities']}**, "
                 f"period: **{info['first_year']}–{info['last_year']}**")
    lines.append("")
    lines.append(f"## KPIs ({kpi['latest_year']})")
    lines.append("| metric | value |")
    lines.append("|---|---:|")
    lines.append(f"| total emissions | {format_emissions(kpi['global_emissions'])} t |")
    lines.append(f"| yearly variation | {kpi['yearly_variation']:+.2f}% |")
    lines.append(f"| top emitter | {kpi['top_emitter'] or 'N/A'} |")
    lines.append(f"| top {KPI_TOP_N} share | {kpi['top_share_pct']:.1f}% |")
    lines.append("")

    if year is not None:
        top = get_top_countries(records, year, args.limit, specific_country=args.country)
        if args.country:
            lines.append(f"## {args.country} ({year})")
            lines.append("| country | code | emissions | growth | global rank |")
            lines.append("|---|---|---:|---:|---:|")
            for _, r in top.iterrows():
                rank = r["global_rank"] if r["global_rank"] is not None else "–"
                lines.append(f"| {r['country']} | {r['code']} | {format_emissions(r['emissions'])} | "
                             f"{r['growth']:+.2f}% | {rank} |")
            if top.empty:
                lines.append(f"| {args.country} | – | no data | – | – |")
        else:
            lines.append(f"## Top {args.limit} countries ({year})")
            lines.append("| # | country | code | emissions |")
            lines.append("|---:|---|---|---:|")
            for i, r in enumerate(top.itertuples(index=False), start=1):
                lines.append(f"| {i} | {r.country} | {r.code} | {format_emissions(r.emissions)} |")
        lines.append("")

    if world is not None:
        ginfo = global_info(world)
        lines.append(f"## Most contaminated years (world, {ginfo['first_year']}–{ginfo['last_year']})")
        lines.append("| rank | year | emissions | entity |")
        lines.append("|---:|---:|---:|---|")
        for r in get_top_contaminated_years(world, args.years_limit).itertuples(index=False):
            lines.append(f"| {r.rank} | {r.year} | {format_emissions(r.emissions)} | {r.entity} |")
        peak = get_most_contaminated_year(world)
        lines.append("")
        lines.append(f"Peak year: **{peak['year']}** ({format_emissions(peak['emissions'])} t)" if peak
                     else "Peak year: not available")

    Path(args.out_md).parent.mkdir(parents=True, exist_ok=True)
    Path(args.out_md).write_text("\n".join(lines), encoding="utf-8")
    print("[OK] rankings md written:", args.out_md)

if __name__ == "__main__":
    main()
