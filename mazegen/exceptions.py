import typing as t


class InvalidShapeError(Exception):
    """Raised when a quadrant cannot be expanded: empty, ragged or not 2D."""

    def __init__(self, message: str, shape: t.Any = None):
        super().__init__(message)
        self.shape = shape


class UnknownCellKindError(InvalidShapeError):
    def __init__(self, value: t.Any, cell: t.Tuple[int, int]):
        super().__init__(
            "Unknown cell value {} at quadrant cell {}.".format(value, cell)
        )
        self.value = value
        self.cell = cell
