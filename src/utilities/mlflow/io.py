"""MLflow I/O utilities for experiment tracking."""

import logging
import os
from pathlib import Path

import mlflow

log = logging.getLogger(__name__)


def setup_mlflow_tracking(mode: str = "local", tracking_uri: str = None) -> str:
    """Configure MLflow tracking and return the tracking URI in use.

    Parameters
    ----------
    mode : str
        "local" (file store under ./mlruns) or "remote" (tracking_uri, or
        MLFLOW_TRACKING_URI from the environment / .env).
    tracking_uri : str, optional
        Explicit URI for remote mode.
    """
    if mode == "local":
        os.environ.pop("MLFLOW_TRACKING_URI", None)
        mlruns_path = Path.cwd() / "mlruns"
        uri = f"file://{mlruns_path}"
        log.info(f"Using local file-based MLflow tracking backend: {uri}")
    elif mode == "remote":
        uri = tracking_uri or os.environ.get("MLFLOW_TRACKING_URI")
        if not uri:
            raise RuntimeError(
                "Remote MLflow tracking requires tracking_uri or MLFLOW_TRACKING_URI."
            )
        log.info(f"Using remote MLflow tracking server: {uri}")
    else:
        raise ValueError(f"Unknown MLflow mode: {mode}")

    mlflow.set_tracking_uri(uri)
    return uri


def log_occupancy_run(summary, trace=None) -> None:
    """Log occupancy counts (and contour trace stats) to the active run."""
    mlflow.log_metrics(summary.to_mlflow())
    if trace is not None:
        mlflow.log_metrics(
            {
                "contour_nodes": len(trace),
                "contour_steps": trace.steps,
                "contour_closed": int(trace.closed),
            }
        )
