"""Paths and parameters for the polio incidence heatmaps."""
from dataclasses import dataclass
from typing import Tuple
import os

PROJECT_ROOT: str = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DATA_PATH: str = os.path.join(PROJECT_ROOT, "data", "polio_tycho.csv")
PLOTS_DIR: str = os.path.join(PROJECT_ROOT, "plots")

TARGET_DISEASE: str = "POLIO"
TARGET_LOC_TYPE: str = "STATE"

# Salk vaccine introduced
VACCINE_YEAR: int = 1955
TICK_STRIDE: int = 5

FIGURE_SIZE: Tuple[float, float] = (12, 10)
DPI: int = 150
MISSING_COLOR: str = "#f6f6f6"
INCIDENCE_LABEL: str = "Incidence per 100,000"


@dataclass(frozen=True)
class ColumnMap:
    """Source column names; defaults follow the Tycho level-1 export."""
    disease: str = "disease"
    loc_type: str = "loc_type"
    region: str = "loc"
    epi_week: str = "epi_week"
    incidence: str = "incidence_per_100000"

    def required(self) -> Tuple[str, ...]:
        return (self.disease, self.loc_type, self.region, self.epi_week, self.incidence)


DEFAULT_COLUMNS: ColumnMap = ColumnMap()
