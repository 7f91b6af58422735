"""Exceptions for programming errors and defect states.

Expected move rejections are reported through ProcessResult, not raised.
"""


class OutOfBounds(IndexError):
    """A board coordinate lies outside the grid."""

    def __init__(self, row: int, col: int, rows: int, cols: int):
        super().__init__(f"({row}, {col}) is outside the {rows}x{cols} board")
        self.row = row
        self.col = col


class InvariantViolation(RuntimeError):
    """The engine reached a state the rules should make unreachable."""
