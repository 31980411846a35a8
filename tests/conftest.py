from typing import Callable, List, Optional
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd
import pytest

HEADER = "epi_week,state,loc,loc_type,disease,cases,incidence_per_100000"


def row(epi_week: str, loc: str = "OHIO", incidence: Optional[float] = 1.0,
        disease: str = "POLIO", loc_type: str = "STATE") -> str:
    value = "" if incidence is None else str(incidence)
    return f"{epi_week},OH,{loc},{loc_type},{disease},1,{value}"


@pytest.fixture
def write_csv(tmp_path) -> Callable[[List[str]], str]:
    """Write rows under the Tycho header and return the file path."""
    def _write(rows: List[str], header: str = HEADER, name: str = "tycho.csv") -> str:
        path = tmp_path / name
        path.write_text("\n".join([header] + rows) + "\n", encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def aggregated() -> pd.DataFrame:
    return pd.DataFrame({
        "year": [1950, 1950, 1951, 1956],
        "region": ["OHIO", "IOWA", "OHIO", "IOWA"],
        "incidence": [15.0, 0.0, 3.5, 40.0],
    })


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture
def make_row() -> Callable[..., str]:
    return row
