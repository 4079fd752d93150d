"""Engine exceptions."""


class InvalidBoard(ValueError):
    """Raised when a layout cannot be turned into a playable board."""


class OutOfBounds(IndexError):
    """Raised when a cell is queried directly outside the grid."""
