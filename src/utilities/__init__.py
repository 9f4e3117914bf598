"""Cross-project utilities (MLflow tracking, text formatting)."""

from utilities.formatting import core_matrix_to_string  # noqa: F401

__all__ = [
    "core_matrix_to_string",
]
