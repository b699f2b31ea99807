"""An audio disc holding a bounded list of tracks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .track import Track

MAX_TRACKS = 4
NO_TRACK = -1


@dataclass
class Disc:
    """A disc: title, cover image path, genre, total duration and its tracks."""

    title: str = ""
    cover: str = ""
    genre: str = ""
    duration: int = 0
    tracks: list[Track] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.tracks) > MAX_TRACKS:
            raise ValueError(f"a disc holds at most {MAX_TRACKS} tracks")

    def __len__(self) -> int:
        return len(self.tracks)

    def add_track(self, title: str, duration: int, url: str) -> bool:
        """Append a track if there is room; return whether it was added.

        The disc's total duration is left unchanged.
        """
        if len(self.tracks) >= MAX_TRACKS:
            return False
        self.tracks.append(Track(title, duration, url))
        return True

    def remove_track(self, index: int) -> Optional[Track]:
        """Remove the track at ``index`` and subtract its length from the total.

        Return the removed track, or None when the index is out of range.
        """
        if not 0 <= index < len(self.tracks):
            return None
        removed = self.tracks.pop(index)
        self.duration -= removed.duration
        return removed

    def track(self, index: int) -> Track:
        """Return the track at ``index`` (from 0), or an empty track if out of range."""
        if 0 <= index < len(self.tracks):
            return self.tracks[index]
        return Track()

    def formatted_duration(self) -> str:
        """Return the total duration as ``MM:SS``."""
        minutes, seconds = divmod(self.duration, 60)
        return f"{minutes:02d}:{seconds:02d}"