"""States and play modes of a disc player."""

from __future__ import annotations

import enum


class PlayerState(enum.Enum):
    """Where the player stands: tray, disc and motor together."""

    EMPTY_STOPPED = "empty_stopped"
    """Tray closed and empty, motor stopped."""
    OPEN_STOPPED = "open_stopped"
    """Tray open (empty or loaded), motor stopped."""
    LOADED_STOPPED = "loaded_stopped"
    """Tray closed and loaded, motor stopped, head on the first track."""
    PAUSED = "paused"
    """Tray closed and loaded, motor stopped, head somewhere in a track."""
    PLAYING = "playing"
    """Tray closed and loaded, motor running."""

    def disc_ready(self) -> bool:
        """True when a disc is inserted and the tray is closed."""
        return self not in (PlayerState.EMPTY_STOPPED, PlayerState.OPEN_STOPPED)


class PlayMode(enum.Enum):
    """How the player moves on once a track ends."""

    SEQUENTIAL = "sequential"
    LOOP = "loop"
    RANDOM = "random"