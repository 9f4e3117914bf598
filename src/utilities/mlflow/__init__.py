"""MLflow utilities for experiment tracking."""

from .io import setup_mlflow_tracking, log_occupancy_run

__all__ = [
    "setup_mlflow_tracking",
    "log_occupancy_run",
]
