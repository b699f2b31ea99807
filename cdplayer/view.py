"""The control panel of a disc player: buttons, labels, sliders and a status line.

The panel keeps the state of its widgets and forwards the user's actions to
the player attached to it.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

log = logging.getLogger(__name__)

BUTTONS = (
    "previous",
    "restart",
    "play_pause",
    "stop",
    "next",
    "open_close",
    "loop",
    "sequential",
    "random",
    "insert",
    "eject",
    "mute",
    "volume",
    "elapsed",
)

LABELS = (
    "disc",
    "title",
    "rank",
    "track_count",
    "disc_duration",
    "genre",
    "image",
)

_DISABLED_AT_START = (
    "stop",
    "next",
    "random",
    "restart",
    "previous",
    "play_pause",
    "insert",
    "elapsed",
    "eject",
)


class PlayerView:
    """Widget state of the panel; every control but open/close, loop and
    sequential starts disabled."""

    def __init__(self, player: Any = None) -> None:
        self.player = player
        self._enabled = {name: True for name in BUTTONS}
        for name in _DISABLED_AT_START:
            self._enabled[name] = False
        self._labels = {name: "" for name in LABELS}
        self.status = ""
        self.elapsed = 0
        self.volume = 0
        self.play_checked = False
        self.tray_checked = False
        self.mute_checked = False

    def attach(self, player: Any) -> None:
        """Connect the panel to the player it drives."""
        self.player = player

    # widget state

    def set_enabled(self, name: str, enabled: bool) -> None:
        if name not in self._enabled:
            raise KeyError(f"unknown control: {name}")
        self._enabled[name] = bool(enabled)

    def is_enabled(self, name: str) -> bool:
        try:
            return self._enabled[name]
        except KeyError:
            raise KeyError(f"unknown control: {name}") from None

    def set_label(self, name: str, text: str) -> None:
        if name not in self._labels:
            raise KeyError(f"unknown label: {name}")
        self._labels[name] = text

    def label(self, name: str) -> str:
        try:
            return self._labels[name]
        except KeyError:
            raise KeyError(f"unknown label: {name}") from None

    def show_message(self, text: str) -> None:
        """Show ``text`` in the status line."""
        self.status = text

    # user actions

    def press_previous(self) -> None:
        if self.player:
            self.player.previous()

    def press_restart(self) -> None:
        if self.player:
            self.player.restart()

    def toggle_play(self, checked: bool) -> None:
        self.play_checked = checked
        if self.player:
            if checked:
                self.player.play()
            else:
                self.player.pause()

    def press_stop(self) -> None:
        if self.player:
            self.player.stop()
        if self.play_checked:
            self.toggle_play(False)

    def press_next(self) -> None:
        if self.player:
            self.player.next()

    def toggle_tray(self, checked: bool) -> None:
        self.tray_checked = checked
        if self.player:
            if checked:
                self.player.open_tray()
            else:
                self.player.close_tray()

    def press_loop(self) -> None:
        if self.player:
            self.player.loop_mode()

    def press_sequential(self) -> None:
        if self.player:
            self.player.sequential_mode()

    def press_random(self) -> None:
        if self.player:
            self.player.random_mode()

    def press_insert(self) -> None:
        if self.player:
            self.player.insert_disc()

    def press_eject(self) -> None:
        if self.player:
            self.player.eject_disc()

    def toggle_mute(self, checked: bool) -> None:
        self.mute_checked = checked
        if self.player:
            if checked:
                self.player.mute()
            else:
                self.player.unmute()

    def change_volume(self, value: int) -> None:
        self.volume = value
        if self.player:
            self.player.set_volume(value)

    def elapsed_changed(self, value: int) -> None:
        """Move the elapsed-time slider to ``value``."""
        self.elapsed = value
        log.debug("elapsed time now %s", value)