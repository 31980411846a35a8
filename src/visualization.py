"""Module responsible for generating visualization of data"""
from typing import List, Optional, Tuple
import logging
import os
import numpy as np
import pandas as pd
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from matplotlib.colors import Normalize
from matplotlib.figure import Figure
import seaborn as sns
from colormaps import ColorPolicy, SegmentedPolicy  # type: ignore
from config import (DPI, FIGURE_SIZE, INCIDENCE_LABEL, MISSING_COLOR,  # type: ignore
                    TICK_STRIDE, VACCINE_YEAR)
from errors import RenderError  # type: ignore

logger = logging.getLogger(__name__)


class Visualization:
    """Class responsible for graphing aggregated incidence data."""

    def __init__(self, data: pd.DataFrame) -> None:
        self.data = data
        self.setup_plotting_style()

    def setup_plotting_style(self) -> None:
        """Set up consistent plotting style for all visualizations."""
        sns.set_style("ticks")

    def incidence_grid(self) -> pd.DataFrame:
        """Pivot to region x year; years with no row for a region stay NaN."""
        missing = [c for c in ("year", "region", "incidence") if c not in self.data.columns]
        if missing:
            raise RenderError(f"Aggregated table lacks column(s) {missing}")
        if self.data.empty:
            raise RenderError("Nothing to render: aggregated table is empty.")
        data = self.data.dropna(subset=["region"])
        regions: List[str] = sorted(data["region"].unique())
        if not regions:
            raise RenderError("Nothing to render: no regions in aggregated table.")

        years = data["year"].astype(int)
        grid = data.assign(year=years).pivot(index="region", columns="year", values="incidence")
        return grid.reindex(index=regions, columns=range(years.min(), years.max() + 1))

    def color_limits(self, policy: ColorPolicy, values: np.ma.MaskedArray) -> Tuple[float, float]:
        """Range of the drawn cells, or the policy's fixed limits."""
        if policy.limits is not None:
            vmin, vmax = policy.limits
        else:
            vmin, vmax = float(values.min()), float(values.max())
        if vmax <= vmin:
            # zero-width range: every cell takes the minimum colour
            vmax = vmin + 1.0
        return vmin, vmax

    def plot_incidence_heatmap(
            self,
            policy: ColorPolicy,
            title: str = "Polio incidence by state",
            save_path: Optional[str] = None,
            vaccine_year: int = VACCINE_YEAR,
            tick_stride: int = TICK_STRIDE) -> Figure:
        """Create a year x region heatmap coloured through `policy`."""
        if tick_stride <= 0:
            raise ValueError("tick_stride must be positive.")
        grid = self.incidence_grid()
        years: List[int] = list(grid.columns)
        values = np.ma.masked_invalid(grid.to_numpy(dtype=float))

        cmap = policy.to_colormap().with_extremes(bad=MISSING_COLOR)
        vmin, vmax = self.color_limits(policy, values)
        norm = Normalize(vmin=vmin, vmax=vmax, clip=True)

        fig, ax = plt.subplots(figsize=FIGURE_SIZE)
        ax.set_facecolor(MISSING_COLOR)
        x_edges = np.arange(years[0] - 0.5, years[-1] + 1.5)
        y_edges = np.arange(len(grid.index) + 1)
        mesh = ax.pcolormesh(x_edges, y_edges, values, cmap=cmap, norm=norm,
                             edgecolors="white", linewidth=0.25)

        ax.set_yticks(y_edges[:-1] + 0.5)
        ax.set_yticklabels(grid.index, fontsize=7)
        ax.invert_yaxis()
        ax.set_xticks(list(range(years[0], years[-1] + 1, tick_stride)))
        ax.set_xlim(x_edges[0], x_edges[-1])
        ax.tick_params(axis="both", length=0)
        sns.despine(ax=ax, left=True, bottom=True)

        # Static annotation, drawn even when the year is outside the data
        ax.axvline(x=vaccine_year, color="black", linewidth=1.5)
        ax.text(vaccine_year, 1.01, "Vaccine introduced", transform=ax.get_xaxis_transform(),
                ha="center", va="bottom", fontsize=9)

        cbar = fig.colorbar(mesh, ax=ax, orientation="horizontal",
                            fraction=0.03, pad=0.05, aspect=40)
        cbar.set_label(INCIDENCE_LABEL)
        if isinstance(policy, SegmentedPolicy):
            # ticks where one ramp hands over to the next
            cbar.set_ticks([vmin + b * (vmax - vmin) for b in policy.boundaries()])
        ax.set_title(title, fontsize=14, loc="left", pad=20)

        if save_path is not None:
            save_path = os.path.normpath(save_path)
            directory = os.path.dirname(save_path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            fig.savefig(save_path, dpi=DPI, bbox_inches='tight')
            plt.close(fig)
            logger.info("Saved %s", save_path)
        return fig
