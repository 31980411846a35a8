import pandas as pd
import pytest
from errors import FormatError, ParseError
from loader import derive_year, load_incidence


def test_keeps_only_target_disease_and_location_type(write_csv, make_row):
    path = write_csv([
        make_row("195001"),
        make_row("195002", disease="MEASLES"),
        make_row("195003", loc_type="CITY"),
    ])
    filtered = load_incidence(path)
    assert list(filtered.columns) == ["epi_week", "year", "region", "incidence"]
    assert filtered["epi_week"].tolist() == ["195001"]


def test_measles_row_is_excluded_whatever_its_other_fields(write_csv, make_row):
    path = write_csv([make_row("19xx01", loc="TEXAS", incidence=None, disease="MEASLES")])
    filtered = load_incidence(path)
    assert filtered.empty


def test_year_is_first_four_characters(write_csv, make_row):
    weeks = ["192801", "195052", "200013"]
    filtered = load_incidence(write_csv([make_row(w) for w in weeks]))
    for week, year in zip(filtered["epi_week"], filtered["year"]):
        assert year == int(week[:4])
    assert filtered["year"].tolist() == [1928, 1950, 2000]


def test_missing_incidence_is_kept_as_nan(write_csv, make_row):
    filtered = load_incidence(write_csv([make_row("195001", incidence=None)]))
    assert len(filtered) == 1
    assert pd.isna(filtered.loc[0, "incidence"])


def test_backslash_n_is_treated_as_missing(write_csv):
    path = write_csv(["195001,OH,OHIO,STATE,POLIO,1,\\N"])
    assert pd.isna(load_incidence(path).loc[0, "incidence"])


def test_no_matching_rows_gives_empty_table(write_csv, make_row):
    filtered = load_incidence(write_csv([make_row("195001", disease="MUMPS")]))
    assert filtered.empty
    assert list(filtered.columns) == ["epi_week", "year", "region", "incidence"]


def test_malformed_week_fails_whole_load(write_csv, make_row):
    path = write_csv([make_row("195001"), make_row("19a001")])
    with pytest.raises(FormatError):
        load_incidence(path)


def test_short_week_fails(write_csv, make_row):
    with pytest.raises(FormatError):
        load_incidence(write_csv([make_row("195")]))


def test_missing_column_is_parse_error(write_csv):
    path = write_csv(["195001,OH,OHIO,STATE,POLIO,1"],
                     header="epi_week,state,loc,loc_type,disease,cases")
    with pytest.raises(ParseError, match="incidence_per_100000"):
        load_incidence(path)


def test_missing_file_is_parse_error(tmp_path):
    with pytest.raises(ParseError):
        load_incidence(str(tmp_path / "absent.csv"))


def test_empty_file_is_parse_error(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    with pytest.raises(ParseError):
        load_incidence(str(path))


def test_non_numeric_incidence_is_parse_error(write_csv, make_row):
    path = write_csv(["195001,OH,OHIO,STATE,POLIO,1,lots"])
    with pytest.raises(ParseError):
        load_incidence(path)


def test_other_targets_can_be_selected(write_csv, make_row):
    path = write_csv([make_row("195001"), make_row("196001", disease="MEASLES")])
    filtered = load_incidence(path, disease="MEASLES")
    assert filtered["year"].tolist() == [1960]


def test_derive_year():
    assert derive_year("195501") == 1955
    assert derive_year(" 200112") == 2001
    with pytest.raises(FormatError):
        derive_year("55")
    with pytest.raises(FormatError):
        derive_year("abcd01")


def test_missing_region_fails_whole_load(write_csv, make_row):
    path = write_csv(["195001,OH,,STATE,POLIO,1,4.0", make_row("195001", incidence=1.0)])
    with pytest.raises(ParseError, match="loc"):
        load_incidence(path)


def test_blank_region_in_other_disease_is_ignored(write_csv, make_row):
    path = write_csv(["195001,OH,,STATE,MEASLES,1,4.0", make_row("195001")])
    assert load_incidence(path)["region"].tolist() == ["OHIO"]


def test_padded_week_goes_through_same_year_rule(write_csv, make_row):
    filtered = load_incidence(write_csv([make_row(" 195002")]))
    assert filtered["epi_week"].tolist() == ["195002"]
    assert filtered["year"].tolist() == [derive_year(" 195002")] == [1950]
