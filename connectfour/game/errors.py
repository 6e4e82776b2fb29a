"""Errors raised by board and game operations."""


class ConnectFourError(Exception):
    """Base class for all engine errors."""


class OutOfRangeError(ConnectFourError, IndexError):
    """Raised when a column or row index lies outside the grid."""


class ColumnFullError(ConnectFourError):
    """Raised when a token is pushed into a column that is already full."""


class UnderflowError(ConnectFourError):
    """Raised when a token is popped from an empty column."""


class NoLegalMovesError(ConnectFourError):
    """Raised when a move is requested but every column is full."""
