"""Command line front end: drive the player's control panel with commands."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, Sequence

from .player import CdPlayer
from .states import PlayerState
from .view import PlayerView

_SIMPLE: dict[str, Callable[[PlayerView], None]] = {
    "open": lambda view: view.toggle_tray(True),
    "close": lambda view: view.toggle_tray(False),
    "insert": PlayerView.press_insert,
    "eject": PlayerView.press_eject,
    "play": lambda view: view.toggle_play(True),
    "pause": lambda view: view.toggle_play(False),
    "stop": PlayerView.press_stop,
    "next": PlayerView.press_next,
    "previous": PlayerView.press_previous,
    "restart": PlayerView.press_restart,
    "loop": PlayerView.press_loop,
    "sequential": PlayerView.press_sequential,
    "random": PlayerView.press_random,
    "mute": lambda view: view.toggle_mute(True),
    "unmute": lambda view: view.toggle_mute(False),
}


def _execute(view: PlayerView, line: str) -> None:
    """Run one command line on ``view``; raise ValueError if it is not understood."""
    name, *args = line.split()
    if name == "volume":
        if len(args) != 1:
            raise ValueError("usage: volume <0-100>")
        try:
            value = int(args[0])
        except ValueError:
            raise ValueError(f"not a volume: {args[0]}") from None
        view.change_volume(value)
        return
    action = _SIMPLE.get(name)
    if action is None or args:
        raise ValueError(f"unknown command: {line}")
    action(view)


def _report(player: CdPlayer) -> str:
    return f"[{player.state.value}] {player.view.status}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cdplayer",
        description="Simulate a disc player. Commands: "
        + ", ".join(sorted([*_SIMPLE, "volume N"]))
        + ". Without commands, they are read from standard input.",
    )
    parser.add_argument("commands", nargs="*", help="commands to run in order")
    args = parser.parse_args(argv)

    view = PlayerView()
    player = CdPlayer(view)
    player.state = PlayerState.EMPTY_STOPPED

    if args.commands:
        for line in args.commands:
            if not line.strip():
                continue
            try:
                _execute(view, line)
            except ValueError as exc:
                print(f"cdplayer: {exc}", file=sys.stderr)
                return 2
            print(_report(player))
        return 0

    for raw in sys.stdin:
        line = raw.strip()
        if line in ("quit", "exit"):
            break
        if not line:
            continue
        try:
            _execute(view, line)
        except ValueError as exc:
            print(f"cdplayer: {exc}", file=sys.stderr)
            continue
        print(_report(player))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())