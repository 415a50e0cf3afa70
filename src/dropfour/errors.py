from __future__ import annotations


class ActionError(ValueError):
    """An agent asked for a move the board cannot take."""

    def __init__(self, column: int, message: str) -> None:
        super().__init__(message)
        self.column = column


class InvalidColumn(ActionError):
    def __init__(self, column: int, cols: int) -> None:
        super().__init__(column, f"Column must be between 0 and {cols - 1}. Got `{column}`.")
        self.cols = cols


class ColumnFull(ActionError):
    def __init__(self, column: int) -> None:
        super().__init__(column, f"Column `{column}` is full.")
