import pandas as pd
import pytest

from co2dash.ranking import (
    get_country_with_growth,
    get_most_contaminated_year,
    get_top_contaminated_years,
    get_top_countries,
)


@pytest.fixture
def world():
    return pd.DataFrame({"entity": "World", "year": [1950, 2019, 2020],
                         "emissions": [5.0, 100.0, 100.0]})


class TestTopCountries:
    def test_top_n(self):
        recs = pd.DataFrame({"entity": ["A", "B", "C"], "code": ["a", "b", "c"],
                             "year": 2020, "emissions": [100.0, 300.0, 50.0]})
        out = get_top_countries(recs, 2020, limit=2)
        assert out.to_dict(orient="records") == [
            {"country": "B", "emissions": 300.0, "code": "b"},
            {"country": "A", "emissions": 100.0, "code": "a"},
        ]

    def test_ties_keep_input_order(self):
        recs = pd.DataFrame({"entity": ["X", "Y", "Z"], "code": "", "year": 2020,
                             "emissions": [1.0, 5.0, 5.0]})
        assert get_top_countries(recs, 2020)["country"].tolist() == ["Y", "Z", "X"]

    def test_year_without_data(self, records):
        assert get_top_countries(records, 1900).empty

    def test_limit_zero(self, records):
        assert get_top_countries(records, 2020, limit=0).empty

    @pytest.mark.parametrize("limit", [-1, 2.5, "3", True])
    def test_bad_limit(self, records, limit):
        with pytest.raises(ValueError):
            get_top_countries(records, 2020, limit=limit)

    def test_specific_country(self, records):
        out = get_top_countries(records, 2020, specific_country="A")
        row = out.iloc[0]
        assert len(out) == 1
        assert row["country"] == "A"
        assert row["growth"] == 25.0
        assert row["global_rank"] == 2

    def test_specific_country_missing(self, records):
        out = get_top_countries(records, 2020, specific_country="Nowhere")
        assert out.empty
        assert "global_rank" in out.columns


class TestCountryWithGrowth:
    def test_growth_and_rank(self, records):
        res = get_country_with_growth(records, "A", 2020)
        assert res == {"entity": "A", "code": "AAA", "year": 2020, "emissions": 100.0,
                       "growth": 25.0, "global_rank": 2}

    def test_no_previous_year(self, records):
        assert get_country_with_growth(records, "B", 2019)["growth"] == 0.0

    def test_zero_previous_year(self, records):
        recs = pd.concat([records, pd.DataFrame([{"entity": "D", "code": "", "year": 2019, "emissions": 0.0},
                                                 {"entity": "D", "code": "", "year": 2020, "emissions": 7.0}])],
                         ignore_index=True)
        assert get_country_with_growth(recs, "D", 2020)["growth"] == 0.0

    def test_absent_current_year(self, records):
        assert get_country_with_growth(records, "A", 2021) is None

    def test_does_not_reorder_input(self, records):
        before = records.copy()
        get_country_with_growth(records, "C", 2020)
        pd.testing.assert_frame_equal(records, before)


class TestContaminatedYears:
    def test_top_years_ranked(self, world):
        out = get_top_contaminated_years(world, limit=2)
        assert out.to_dict(orient="records") == [
            {"rank": 1, "year": 2019, "emissions": 100.0, "entity": "World"},
            {"rank": 2, "year": 2020, "emissions": 100.0, "entity": "World"},
        ]

    def test_limit_larger_than_data(self, world):
        assert get_top_contaminated_years(world, limit=10)["rank"].tolist() == [1, 2, 3]

    def test_most_contaminated_first_max(self, world):
        assert get_most_contaminated_year(world) == {"entity": "World", "year": 2019, "emissions": 100.0}

    def test_most_contaminated_empty(self):
        empty = pd.DataFrame(columns=["entity", "year", "emissions"])
        assert get_most_contaminated_year(empty) is None
        assert get_most_contaminated_year(None) is None
