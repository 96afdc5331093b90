"""
Pipeline configuration: single source of truth for column aliases, entity sets,
validity floors and dataset locations.
"""
import os
from pathlib import Path

# Ordered alias lists; the first present value wins.
ENTITY_ALIASES = ("Entity", "country", "entity")
YEAR_ALIASES = ("Year", "year")
EMISSIONS_ALIASES = ("Annual CO₂ emissions", "emissions", "co2")
CODE_ALIASES = ("Code", "code", "iso_code")

# Validity
MIN_YEAR = 1750
# Upper bound for a parsed year; anything larger (1e30, inf) is a bad row, not a date
MAX_YEAR = 9999
UNKNOWN_ENTITY = "Unknown"

# World-aggregate identifiers accepted by the global extractor
WORLD_ENTITIES = frozenset({"World", "OWID_WRL"})

# Every world/regional aggregate that shows up next to real countries
AGGREGATE_ENTITIES = frozenset({
    "World", "OWID_WRL", "Africa", "Asia", "Europe", "North America",
    "South America", "Oceania", "European Union", "Asia (excl. China and India)",
    "North America (excl. USA)", "International transport", "Non-OECD", "OECD",
})

# Dataset name -> name used by the world map geometry
COUNTRY_NAME_MAPPINGS = {
    "United States": "United States of America",
    "Russia": "Russian Federation",
    "Iran": "Iran (Islamic Republic of)",
    "South Korea": "Korea, Republic of",
    "North Korea": "Korea, Democratic People's Republic of",
    "Vietnam": "Viet Nam",
}

# Ranking defaults
TOP_COUNTRIES_LIMIT = 10
TOP_YEARS_LIMIT = 5
KPI_TOP_N = 5

# Query defaults (same as the emissions API)
TRENDS_SINCE = 1990
DEFAULT_QUERY_YEAR = 2023

# Datasets
DATA_DIR = Path(os.environ.get("CO2DASH_DATA_DIR", "data"))
COUNTRY_CSV = DATA_DIR / "co2-dataclean.csv"
WORLD_CSV = DATA_DIR / "co2-data.csv"
SUPPORTED = {".csv", ".parquet", ".feather"}

EMISSIONS_UNITS = "Annual CO₂ emissions (tonnes)"
