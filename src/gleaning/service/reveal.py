# SPDX-License-Identifier: MIT

from enum import Enum

from gleaning import configuration


class RevealState(Enum):
    RESTING = "resting"
    DRAGGING = "dragging"
    REVEALED = "revealed"


class RevealTracker:
    """
    Swipe-to-reveal state for one list item.

    Dragging left slides the item open up to MAX_REVEAL; releasing past
    REVEAL_THRESHOLD leaves the actions revealed, anything less snaps it shut.
    Movements inside DRAG_DEADZONE are ignored so taps do not count as drags.
    This is view state only and is never persisted.
    """

    def __init__(self) -> None:
        self.offset = 0
        self._start_x = 0
        self._dragging = False
        self._revealed = False

    @property
    def state(self) -> RevealState:
        if self._dragging:
            return RevealState.DRAGGING
        if self._revealed:
            return RevealState.REVEALED
        return RevealState.RESTING

    @property
    def is_revealed(self) -> bool:
        return self._revealed

    def start(self, x: int) -> None:
        self._start_x = x
        self._dragging = True

    def move(self, x: int) -> None:
        if not self._dragging:
            return
        diff = self._start_x - x
        if abs(diff) <= configuration.DRAG_DEADZONE:
            return
        if diff > 0:
            self.offset = min(diff, configuration.MAX_REVEAL)
        elif self._revealed:
            # Dragging right on an open item closes it
            self.offset = max(configuration.MAX_REVEAL - abs(diff), 0)

    def release(self) -> bool:
        """End the drag and return whether the item stays revealed."""
        if not self._dragging:
            return self._revealed
        self._dragging = False

        if self.offset > configuration.REVEAL_THRESHOLD:
            self._revealed = True
            self.offset = configuration.MAX_REVEAL
        else:
            self._revealed = False
            self.offset = 0
        return self._revealed

    def reset(self) -> None:
        """Close the item, e.g. because another item was swiped open."""
        self._dragging = False
        self._revealed = False
        self.offset = 0
