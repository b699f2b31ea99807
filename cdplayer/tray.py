"""The tray of a disc player: it opens, closes and holds at most one disc."""

from __future__ import annotations

import enum
from typing import Any, Optional

from .disc import Disc


class OpeningState(enum.Enum):
    CLOSED = "closed"
    OPEN = "open"


class OccupancyState(enum.Enum):
    EMPTY = "empty"
    OCCUPIED = "occupied"


class Tray:
    """A tray that starts closed and empty."""

    def __init__(self, player: Any = None) -> None:
        self.player = player
        self.disc: Optional[Disc] = None
        self.opening = OpeningState.CLOSED

    @property
    def occupancy(self) -> OccupancyState:
        """EMPTY when no disc is held, OCCUPIED otherwise."""
        return OccupancyState.EMPTY if self.disc is None else OccupancyState.OCCUPIED

    @property
    def is_open(self) -> bool:
        return self.opening is OpeningState.OPEN

    def open(self) -> None:
        self.opening = OpeningState.OPEN

    def close(self) -> None:
        self.opening = OpeningState.CLOSED

    def insert(self, disc: Disc) -> None:
        """Place ``disc`` in the tray."""
        self.disc = disc

    def remove(self) -> Optional[Disc]:
        """Take the disc out of the tray and return it (None if it was empty)."""
        disc, self.disc = self.disc, None
        return disc