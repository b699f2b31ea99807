"""The sound output of a disc player: a volume and a mute switch."""

from __future__ import annotations


class SoundOutput:
    """A sound output whose volume lies between 0.0 and 1.0."""

    def __init__(self, volume: float = 1.0) -> None:
        self.volume = 1.0
        self.muted = False
        self.set_volume(volume)

    def set_volume(self, volume: float) -> None:
        """Set the volume, bounded to the range 0.0 to 1.0."""
        self.volume = min(1.0, max(0.0, float(volume)))

    def mute(self) -> None:
        self.muted = True

    def unmute(self) -> None:
        """Restore sound at the volume last set."""
        self.muted = False

    @property
    def effective_volume(self) -> float:
        """The volume actually heard: 0.0 while muted."""
        return 0.0 if self.muted else self.volume