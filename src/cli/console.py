"""Rich console output helpers."""

from rich.console import Console
from rich.table import Table

console = Console()


def ok(msg: str):
    """Print success message."""
    console.print(f"  [green]✓[/green] {msg}")


def fail(msg: str):
    """Print failure message."""
    console.print(f"  [red]✗[/red] {msg}")


def dim(msg: str):
    """Print dimmed message."""
    console.print(f"  [dim]{msg}[/dim]")


def header(msg: str):
    """Print bold header."""
    console.print(f"\n[bold]{msg}[/bold]")


def summary_table(summary) -> Table:
    """Voxel counts of an OccupancySummary as a rich table."""
    table = Table(title=f"Occupancy {summary.n}x{summary.m}x{summary.l}")
    table.add_column("state")
    table.add_column("voxels", justify="right")
    table.add_column("fraction", justify="right")
    for label, count in (
        ("biomass", summary.n_biomass),
        ("carrier", summary.n_carrier),
        ("occupied", summary.n_occupied),
        ("border", summary.n_border),
    ):
        table.add_row(label, str(count), f"{count / summary.n_voxels:.3f}")
    return table


def print_summary(summary, trace=None):
    """Print occupancy counts and, if given, the contour trace outcome."""
    header("Occupancy")
    console.print(summary_table(summary))
    if trace is None:
        return
    if trace.closed:
        ok(f"closed contour: {len(trace)} nodes in {trace.steps} steps")
    else:
        fail(f"incomplete contour: {len(trace)} nodes after {trace.steps} steps")
