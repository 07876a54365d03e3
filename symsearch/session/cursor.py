import logging

logger = logging.getLogger(__name__)

NO_SELECTION = -1


def clamp(value: int, lo: int, hi: int) -> int:
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


class SelectionCursor:
    """Tracks which result in the displayed window is highlighted.

    The index is NO_SELECTION (-1) or a valid position in a window of
    ``size`` results. Moving clamps at both ends instead of wrapping.
    """

    def __init__(self, size: int = 0):
        self.size = size
        self.index = NO_SELECTION

    @property
    def has_selection(self) -> bool:
        return 0 <= self.index < self.size

    def reset(self, size: int) -> None:
        """Start over on a new result set."""
        self.size = size
        self.index = NO_SELECTION

    def cancel(self) -> None:
        """Drop the selection but keep the results."""
        self.index = NO_SELECTION

    def move(self, direction: int) -> int:
        """Move the cursor by direction (+1 down, -1 up).

        Returns:
            The new cursor index
        """
        if self.size <= 0:
            self.index = NO_SELECTION
            return self.index

        if not self.has_selection:
            if direction > 0:
                self.index = direction - 1
            elif direction < 0:
                self.index = direction + self.size
        else:
            self.index += direction

        self.index = clamp(self.index, 0, self.size - 1)
        logger.debug(f"Cursor moved to {self.index} of {self.size}")
        return self.index

    def __repr__(self) -> str:
        return f"SelectionCursor(index={self.index}, size={self.size})"
