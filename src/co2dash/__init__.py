"""Cleaning, aggregation and ranking of per-country and world CO₂ emissions."""
from .aggregate import (
    aggregate_by_year,
    country_data,
    data_for_year,
    filter_by_year_range,
    with_variation,
)
from .cleaning import drop_aggregates, extract_global, normalize, normalize_country_names
from .loaders import DatasetLoadError, load_any, load_country_data, load_world_data, save_any
from .ranking import (
    get_country_with_growth,
    get_most_contaminated_year,
    get_top_contaminated_years,
    get_top_countries,
)

__version__ = "0.1.0"
