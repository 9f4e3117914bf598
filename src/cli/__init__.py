"""Terminal output for occupancy runs."""

from .console import console, ok, fail, dim, header, print_summary

__all__ = [
    "console",
    "ok",
    "fail",
    "dim",
    "header",
    "print_summary",
]
