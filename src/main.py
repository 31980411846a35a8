"""Runs the polio incidence analysis."""
from typing import Dict
import logging
import os
import pandas as pd
from analysis import Analyzer # type: ignore
from colormaps import LINEAR_POLICY, WSJ_POLICY, ColorPolicy # type: ignore
from config import DATA_PATH, PLOTS_DIR # type: ignore
from loader import load_incidence # type: ignore
from visualization import Visualization # type: ignore

logger = logging.getLogger(__name__)

CHARTS: Dict[str, ColorPolicy] = {
    "polio_linear": LINEAR_POLICY,
    "polio_wsj": WSJ_POLICY,
}


def run(filepath: str = DATA_PATH, plots_dir: str = PLOTS_DIR) -> Dict[str, str]:
    """Load, aggregate and render both charts; return chart name -> image path."""
    # Load data
    filtered: pd.DataFrame = load_incidence(filepath)

    analyzer: Analyzer = Analyzer(filtered)
    aggregated: pd.DataFrame = analyzer.aggregate()
    logger.info("Summary: %s", analyzer.summarize(aggregated))

    # Create visualization
    visualizer: Visualization = Visualization(aggregated)
    saved: Dict[str, str] = {}
    for name, policy in CHARTS.items():
        local_save_path = os.path.join(plots_dir, name + ".png")
        visualizer.plot_incidence_heatmap(policy, save_path=local_save_path)
        saved[name] = local_save_path
    return saved


def main() -> None:
    """Main function to implement polio incidence analysis."""
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    run()

if __name__ == "__main__":
    main()
