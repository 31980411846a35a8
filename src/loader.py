"""Loads the weekly incidence export and keeps one disease at one granularity.

The source file is a Tycho-style CSV: one row per (epi week, location,
disease). Only the five columns named by `ColumnMap` are used. Rows are kept
when both the disease and the location type match exactly; a year is then
derived from the first four characters of the epi week.
"""
from typing import List
import logging
import re
import pandas as pd
from config import ColumnMap, DEFAULT_COLUMNS, TARGET_DISEASE, TARGET_LOC_TYPE  # type: ignore
from errors import FormatError, ParseError  # type: ignore

logger = logging.getLogger(__name__)

YEAR_PREFIX = re.compile(r"^[0-9]{4}")
# Database exports write absent values as \N
NA_VALUES: List[str] = ["\\N"]

FILTERED_COLUMNS: List[str] = ["epi_week", "year", "region", "incidence"]


def derive_year(epi_week: str) -> int:
    """Return the year encoded in the first four characters of a YYYYWW id."""
    text = str(epi_week).strip()
    if not YEAR_PREFIX.match(text):
        raise FormatError(f"Time identifier {epi_week!r} does not start with a 4-digit year")
    return int(text[:4])


def read_source(path: str, columns: ColumnMap = DEFAULT_COLUMNS) -> pd.DataFrame:
    """Read the CSV as text and check that every required column is present."""
    try:
        df = pd.read_csv(path, dtype=str, na_values=NA_VALUES, encoding="utf-8")
    except (OSError, UnicodeDecodeError, pd.errors.EmptyDataError, pd.errors.ParserError) as err:
        raise ParseError(f"Cannot read {path} as delimited text: {err}") from err

    df.rename(columns={c: str(c).strip() for c in df.columns}, inplace=True)
    missing = [c for c in columns.required() if c not in df.columns]
    if missing:
        raise ParseError(f"Missing required column(s) {missing}. Available={list(df.columns)}")
    return df


def filter_records(
        df: pd.DataFrame,
        disease: str = TARGET_DISEASE,
        loc_type: str = TARGET_LOC_TYPE,
        columns: ColumnMap = DEFAULT_COLUMNS) -> pd.DataFrame:
    """Keep matching rows and return (epi_week, year, region, incidence)."""
    mask = (df[columns.disease] == disease) & (df[columns.loc_type] == loc_type)
    kept = df.loc[mask, [columns.epi_week, columns.region, columns.incidence]]

    weeks = kept[columns.epi_week].fillna("").astype(str).str.strip()
    bad = ~weeks.map(lambda w: YEAR_PREFIX.match(w) is not None).astype(bool)
    if bad.any():
        first = kept.loc[bad].iloc[0]
        raise FormatError(
            f"{int(bad.sum())} row(s) have a time identifier without a 4-digit year; "
            f"first offending row: {first.to_dict()}")

    no_region = kept[columns.region].fillna("").astype(str).str.strip() == ""
    if no_region.any():
        first = kept.loc[no_region].iloc[0]
        raise ParseError(
            f"{int(no_region.sum())} row(s) have no {columns.region!r} value; "
            f"first offending row: {first.to_dict()}")

    try:
        incidence = pd.to_numeric(kept[columns.incidence], errors="raise").astype(float)
    except (TypeError, ValueError) as err:
        raise ParseError(f"Column {columns.incidence!r} is not numeric: {err}") from err

    out = pd.DataFrame({
        "epi_week": weeks,
        "year": weeks.map(derive_year).astype(int),
        "region": kept[columns.region].astype(object),
        "incidence": incidence,
    }, columns=FILTERED_COLUMNS)
    return out.reset_index(drop=True)


def load_incidence(
        path: str,
        disease: str = TARGET_DISEASE,
        loc_type: str = TARGET_LOC_TYPE,
        columns: ColumnMap = DEFAULT_COLUMNS) -> pd.DataFrame:
    """Load `path` and return the filtered-record table.

    Raises ParseError for unreadable files or missing columns and FormatError
    when any kept row has a malformed epi week. No matching rows is not an
    error; the returned frame is simply empty.
    """
    df = read_source(path, columns)
    filtered = filter_records(df, disease, loc_type, columns)
    logger.info("Loaded %d rows from %s, kept %d for %s/%s",
                len(df), path, len(filtered), disease, loc_type)
    return filtered
