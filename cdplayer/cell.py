"""The reading cell of a disc player: a motor and a simulated reading head."""

from __future__ import annotations

import enum
from typing import Any, Callable, Optional


class MotorState(enum.Enum):
    STOPPED = "stopped"
    RUNNING = "running"


class Cell:
    """Reads the current media, reporting position, duration and end of media.

    Positions and durations are in milliseconds. Listeners are plain callables
    that may be left as None.
    """

    def __init__(
        self,
        player: Any = None,
        *,
        on_position_changed: Optional[Callable[[int], None]] = None,
        on_duration_changed: Optional[Callable[[int], None]] = None,
        on_media_finished: Optional[Callable[[], None]] = None,
    ) -> None:
        self.player = player
        self.motor = MotorState.STOPPED
        self.source: Optional[str] = None
        self.position = 0
        self.duration = 0
        self.on_position_changed = on_position_changed
        self.on_duration_changed = on_duration_changed
        self.on_media_finished = on_media_finished

    @property
    def running(self) -> bool:
        return self.motor is MotorState.RUNNING

    def start(self) -> None:
        """Start the motor; reading resumes from the current position."""
        if self.motor is MotorState.STOPPED:
            self.motor = MotorState.RUNNING

    def stop(self) -> None:
        """Stop the motor; the head stays where it is."""
        if self.motor is MotorState.RUNNING:
            self.motor = MotorState.STOPPED

    def rewind(self) -> None:
        """Move the head back to the start of the current media."""
        self._set_position(0)

    def set_source(self, source: Optional[str]) -> None:
        """Load a new media (or none); the head goes back to the start."""
        self.source = source or None
        self._set_position(0)
        self.set_duration(0)

    def set_duration(self, duration: int) -> None:
        """Record the length of the loaded media and report it."""
        if duration < 0:
            raise ValueError(f"duration cannot be negative: {duration}")
        if duration != self.duration:
            self.duration = duration
            if self.on_duration_changed:
                self.on_duration_changed(duration)

    def advance(self, milliseconds: int) -> None:
        """Move the head forward while the motor runs and a media is loaded."""
        if milliseconds < 0:
            raise ValueError(f"cannot advance by a negative time: {milliseconds}")
        if not self.running or self.source is None:
            return
        position = self.position + milliseconds
        if self.duration > 0:
            position = min(position, self.duration)
        self._set_position(position)
        if self.duration > 0 and position >= self.duration and self.on_media_finished:
            self.on_media_finished()

    def _set_position(self, position: int) -> None:
        self.position = position
        if self.on_position_changed:
            self.on_position_changed(position)