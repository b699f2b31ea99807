"""A single audio track stored on a disc."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Track:
    """An audio track: its title, its length in seconds and where its media lives."""

    title: str = ""
    duration: int = 0
    url: str = ""

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError(f"track duration cannot be negative: {self.duration}")

    def formatted_duration(self) -> str:
        """Return the duration as ``MM:SS``."""
        minutes, seconds = divmod(self.duration, 60)
        return f"{minutes:02d}:{seconds:02d}"