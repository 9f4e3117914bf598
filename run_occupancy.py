"""
Occupancy Runner - Hydra + MLflow integration for the occupancy grid.

Usage:
    uv run python run_occupancy.py
    uv run python run_occupancy.py grid.n=64 grid.m=64 carrier.thickness=4
    uv run python run_occupancy.py -m carrier.thickness=1,2,4

    # Track results in MLflow (local ./mlruns, or remote via .env)
    uv run python run_occupancy.py mlflow.enabled=true
    uv run python run_occupancy.py mlflow.enabled=true mlflow.mode=remote

Setup for remote MLflow:
    cp .env.template .env
    # Edit .env with MLFLOW_TRACKING_URI and credentials
"""

import logging
import sys
from pathlib import Path

import hydra
import mlflow
from dotenv import load_dotenv
from hydra.utils import instantiate
from omegaconf import DictConfig, OmegaConf

# Load .env file (for MLflow credentials)
load_dotenv()

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent / "src"))

from cli.console import dim, print_summary  # noqa: E402
from occupancy import ContourWalker, GridConfig, OccupancyGrid, make_colony_species  # noqa: E402
from utilities.mlflow import log_occupancy_run, setup_mlflow_tracking  # noqa: E402

log = logging.getLogger(__name__)


# =============================================================================
# Factories
# =============================================================================


def create_config(cfg: DictConfig) -> GridConfig:
    """Build the grid configuration; the carrier oracle comes from its _target_."""
    shape = (cfg.grid.n, cfg.grid.m, cfg.grid.l)
    carrier = instantiate(cfg.carrier, _convert_="partial")
    return GridConfig(shape=shape, order=cfg.order, carrier=carrier)


def create_species(cfg: DictConfig, config: GridConfig):
    """Colony species listed under cfg.species."""
    return [
        make_colony_species(
            name=sp.name,
            shape=config.shape,
            order=config.order,
            centers=[tuple(c) for c in sp.centers],
            radius=sp.radius,
            concentration=sp.get("concentration", 1.0),
        )
        for sp in cfg.species
    ]


def run(cfg: DictConfig):
    """Refresh the grid once and (optionally) trace the 2D contour."""
    config = create_config(cfg)
    grid = OccupancyGrid(config)
    grid.refresh(create_species(cfg, config))

    summary = grid.summary()
    log.info(
        f"Occupied {summary.n_occupied}/{summary.n_voxels} voxels "
        f"({summary.n_border} border)"
    )

    trace = None
    if cfg.get("trace_contour", False):
        walker = ContourWalker(grid, max_steps=cfg.get("max_steps"))
        trace = walker.trace_region()
        if trace is None:
            log.warning("No border node on plane k = 1, nothing to trace")
        else:
            log.info(f"Contour: {len(trace)} nodes, closed={trace.closed}")

    return grid, summary, trace


# =============================================================================
# Main Entry Point
# =============================================================================


@hydra.main(config_path="conf", config_name="config", version_base=None)
def main(cfg: DictConfig) -> None:
    """Hydra entry point - runs one occupancy refresh with optional MLflow tracking."""
    log.info(f"Grid: {cfg.grid.n}x{cfg.grid.m}x{cfg.grid.l}, order={cfg.order}")

    if not cfg.mlflow.enabled:
        grid, summary, trace = run(cfg)
    else:
        setup_mlflow_tracking(cfg.mlflow.mode, cfg.mlflow.get("tracking_uri"))
        mlflow.set_experiment(cfg.experiment_name)
        run_name = f"occupancy_{cfg.grid.n}x{cfg.grid.m}x{cfg.grid.l}"
        with mlflow.start_run(run_name=run_name):
            mlflow.log_params(
                {
                    "n": cfg.grid.n,
                    "m": cfg.grid.m,
                    "l": cfg.grid.l,
                    "order": cfg.order,
                    "carrier": cfg.carrier._target_,
                    "n_species": len(cfg.species),
                }
            )
            mlflow.log_dict(OmegaConf.to_container(cfg), "config.yaml")
            grid, summary, trace = run(cfg)
            log_occupancy_run(summary, trace)

    print_summary(summary, trace)
    if cfg.get("print_grid", False):
        for line in str(grid).splitlines():
            dim(line)


if __name__ == "__main__":
    main()
