"""A simulated audio CD player: tracks, discs, tray, reading cell, sound output,
a headless control panel and a command line front end."""

__version__ = "0.5.0"
__all__ = ["track", "disc", "tray", "cell", "sound", "states", "view", "player", "cli"]