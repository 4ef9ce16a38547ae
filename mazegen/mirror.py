import typing as t

import numpy as np
import numpy.typing as npt

from mazegen.exceptions import InvalidShapeError, UnknownCellKindError
from mazegen.types import CellKind, Grid, QuadrantLike

_KNOWN_VALUES = frozenset(int(k) for k in CellKind)


def full_shape(rows: int, cols: int, center_shared: bool = True) -> t.Tuple[int, int]:
    """Size of the level built from a `rows` x `cols` quadrant.

    The center row is always shared between the top and bottom halves. The center
    column is shared only when `center_shared` is set, otherwise columns are doubled.
    """
    full_cols = cols * 2 - 1 if center_shared else cols * 2
    return rows * 2 - 1, full_cols


def to_quadrant_array(quadrant: QuadrantLike) -> npt.NDArray[np.int8]:
    """Validates a quadrant table and returns it as a 2D int8 array."""
    if isinstance(quadrant, np.ndarray):
        if quadrant.ndim != 2 or quadrant.size == 0:
            raise InvalidShapeError(
                "Quadrant must be a non-empty 2D table, got shape {}.".format(
                    quadrant.shape
                ),
                shape=quadrant.shape,
            )
        rows_list = quadrant.tolist()
    else:
        try:
            rows_list = [list(row) for row in quadrant]
        except TypeError as e:
            raise InvalidShapeError("Quadrant must be a table of rows.") from e
        if len(rows_list) == 0 or len(rows_list[0]) == 0:
            raise InvalidShapeError("Quadrant must not be empty.", shape=(0, 0))
        widths = [len(row) for row in rows_list]
        if len(set(widths)) != 1:
            raise InvalidShapeError(
                "Quadrant rows must all have the same length, got {}.".format(widths),
                shape=widths,
            )

    for r, row in enumerate(rows_list):
        for c, value in enumerate(row):
            if isinstance(value, bool) or value not in _KNOWN_VALUES:
                raise UnknownCellKindError(value, (r, c))

    return np.array(rows_list, dtype=np.int8)


def expand(quadrant: QuadrantLike, center_shared: bool = True) -> Grid:
    """
    Builds the full symmetric level from its top-left quadrant.

    The quadrant is copied verbatim to the top-left, then mirrored horizontally,
    vertically and both. The returned grid is read-only.
    """
    source = to_quadrant_array(quadrant)
    rows, cols = source.shape
    full_rows, full_cols = full_shape(rows, cols, center_shared)

    full = np.empty((full_rows, full_cols), dtype=np.int8)

    def fill(target_rows: npt.NDArray[np.intp], target_cols: npt.NDArray[np.intp]):
        full[np.ix_(target_rows, target_cols)] = source

    direct_rows = np.arange(rows)
    direct_cols = np.arange(cols)
    mirrored_rows = full_rows - 1 - direct_rows
    mirrored_cols = full_cols - 1 - direct_cols

    # top-left, top-right, bottom-left, bottom-right
    fill(direct_rows, direct_cols)
    fill(direct_rows, mirrored_cols)
    fill(mirrored_rows, direct_cols)
    fill(mirrored_rows, mirrored_cols)

    full.setflags(write=False)
    return full


def quadrant_shape_of(full: Grid, center_shared: bool = True) -> t.Tuple[int, int]:
    """Inverse of `full_shape`."""
    R, C = full.shape
    cols = (C + 1) // 2 if center_shared else C // 2
    return (R + 1) // 2, cols
