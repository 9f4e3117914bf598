"""Plain-text dump of 3D grids, one block per k plane."""

import numpy as np


def core_matrix_to_string(grid) -> str:
    """Format a 3D grid as text.

    Each k plane becomes a block of rows over i with tab-separated values
    over j. Booleans are written as 0/1. Blocks are separated by a blank line.

    Parameters
    ----------
    grid : np.ndarray or object with view()
        3D array, or a grid exposing an (N, M, L) array through view().
    """
    arr = grid.view() if hasattr(grid, "view") and not isinstance(grid, np.ndarray) else grid
    arr = np.asarray(arr)
    if arr.ndim != 3:
        raise ValueError(f"Expected a 3D grid, got {arr.ndim}D")
    if arr.dtype == np.bool_:
        arr = arr.astype(np.int8)

    blocks = []
    for k in range(arr.shape[2]):
        rows = ["\t".join(str(v) for v in arr[i, :, k]) for i in range(arr.shape[0])]
        blocks.append("\n".join(rows))
    return "\n\n".join(blocks) + "\n"
