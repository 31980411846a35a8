"Analysis module"
from typing import Any, Dict
import logging
import pandas as pd

logger = logging.getLogger(__name__)

AGGREGATED_COLUMNS = ["year", "region", "incidence"]


def aggregate_incidence(filtered: pd.DataFrame) -> pd.DataFrame:
    """Sum incidence per (year, region); missing values count as zero."""
    missing = [c for c in ("year", "region", "incidence") if c not in filtered.columns]
    if missing:
        raise KeyError(f"Filtered table lacks column(s) {missing}")

    grouped = (
        # dropna=False: a missing region is still a key of its own
        filtered.groupby(["year", "region"], sort=True, dropna=False)["incidence"]
        # min_count=0 keeps all-NaN groups at 0.0
        .sum(min_count=0)
        .reset_index()
    )
    grouped["year"] = grouped["year"].astype(int)
    grouped["incidence"] = grouped["incidence"].astype(float)
    return grouped[AGGREGATED_COLUMNS].reset_index(drop=True)


class Analyzer:
    """Class responsible for aggregating incidence data."""

    def __init__(self, data: pd.DataFrame|None = None) -> None:
        self.data = data

    def set_data(self, data: pd.DataFrame) -> None:
        """Set the filtered dataset for analysis."""
        self.data = data

    def aggregate(self) -> pd.DataFrame:
        """Aggregate the filtered dataset by year and region."""
        if self.data is None:
            raise ValueError("No data set. Please call set_data() first.")
        aggregated = aggregate_incidence(self.data)
        logger.info("Aggregated %d rows into %d (year, region) cells",
                    len(self.data), len(aggregated))
        return aggregated

    def summarize(self, aggregated: pd.DataFrame|None = None) -> Dict[str, Any]:
        """Summarize the aggregated table: ranges, totals and the peak cell."""
        if aggregated is None:
            aggregated = self.aggregate()
        if aggregated.empty:
            return {"cells": 0, "regions": 0}
        peak = aggregated.loc[aggregated["incidence"].idxmax()]
        return {
            "cells": len(aggregated),
            "regions": int(aggregated["region"].nunique()),
            "first_year": int(aggregated["year"].min()),
            "last_year": int(aggregated["year"].max()),
            "min_incidence": float(aggregated["incidence"].min()),
            "max_incidence": float(aggregated["incidence"].max()),
            "total_incidence": float(aggregated["incidence"].sum()),
            "peak_year": int(peak["year"]),
            "peak_region": str(peak["region"]),
        }
