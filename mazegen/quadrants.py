import typing as t

# Top-left quadrant of the classic level. Codes follow `CellKind`.
CLASSIC_QUADRANT: t.Tuple[t.Tuple[int, ...], ...] = (
    (1, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 7),
    (2, 5, 5, 5, 5, 5, 5, 5, 5, 5, 5, 5, 5, 4),
    (2, 5, 3, 4, 4, 3, 5, 3, 4, 4, 4, 3, 5, 4),
    (2, 6, 4, 0, 0, 4, 5, 4, 0, 0, 0, 4, 5, 4),
    (2, 5, 3, 4, 4, 3, 5, 3, 4, 4, 4, 3, 5, 3),
    (2, 5, 5, 5, 5, 5, 5, 5, 5, 5, 5, 5, 5, 5),
    (2, 5, 3, 4, 4, 3, 5, 3, 3, 5, 3, 4, 4, 4),
    (2, 5, 3, 4, 4, 3, 5, 4, 4, 5, 3, 4, 4, 3),
    (2, 5, 5, 5, 5, 5, 5, 4, 4, 5, 5, 5, 5, 4),
    (1, 2, 2, 2, 2, 1, 5, 4, 3, 4, 4, 3, 0, 4),
    (0, 0, 0, 0, 0, 2, 5, 4, 3, 4, 4, 3, 0, 3),
    (0, 0, 0, 0, 0, 2, 5, 4, 4, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 2, 5, 4, 4, 0, 3, 4, 4, 8),
    (2, 2, 2, 2, 2, 1, 5, 3, 3, 0, 4, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 5, 0, 0, 0, 4, 0, 0, 0),
)
