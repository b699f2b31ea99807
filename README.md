# cdplayer

A simulated audio CD player. The package models the parts of a player and
the states it moves between:

- `cdplayer.track.Track`: a title, a duration in seconds and a path to the
  media file. `formatted_duration()` gives `MM:SS`.
- `cdplayer.disc.Disc`: a title, a cover path, a genre, a total duration and
  up to four tracks (`MAX_TRACKS`). `add_track()` returns `False` when the
  disc is full and leaves the total duration alone; `remove_track()` takes
  the removed track's length off the total; `track(i)` returns an empty
  `Track` for an index out of range.
- `cdplayer.tray.Tray`: opens, closes and holds at most one disc; its
  `occupancy` is `OccupancyState.EMPTY` or `OccupancyState.OCCUPIED`.
- `cdplayer.cell.Cell`: the reading head. Its motor runs or stops; it holds a
  source, a position and a duration in milliseconds, and calls its listeners
  when the position or duration changes and when the end of the media is
  reached. The head moves only when `advance()` is called.
- `cdplayer.sound.SoundOutput`: a volume between 0.0 and 1.0 and a mute
  switch.
- `cdplayer.states`: `PlayerState` (empty and stopped, open, loaded and
  stopped, paused, playing) and `PlayMode` (sequential, loop, random).
- `cdplayer.player.CdPlayer`: the player. Actions that do not fit the
  current state are ignored. At the end of a track it restarts the track in
  loop mode and moves to the next one otherwise.
- `cdplayer.view.PlayerView`: a headless control panel. It holds the enabled
  state of the controls, the text of the labels and a status message, and
  passes each button press on to the attached player.

## Installation

```
pip install .
```

## Command line

```
cdplayer open insert close play next "volume 40" stop
```

Each argument is one command, run in order on a fresh player with a closed,
empty tray. After each command the player's state and status message are
printed, for example `[open_stopped] OUVERT_CHARGE`. The commands are
`open`, `close`, `insert`, `eject`, `play`, `pause`, `stop`, `next`,
`previous`, `restart`, `loop`, `sequential`, `random`, `mute`, `unmute` and
`volume N` (N from 0 to 100). An unknown command stops the run with exit
status 2.

Without arguments, `cdplayer` reads commands from standard input, one per
line, until `quit`, `exit` or the end of input; an unknown command is
reported and skipped.

## Use from Python

```python
from cdplayer.view import PlayerView
from cdplayer.player import CdPlayer
from cdplayer.states import PlayerState

view = PlayerView()
player = CdPlayer(view)    # attaches itself to the panel

view.toggle_tray(True)     # open the tray
view.press_insert()        # put the demo disc in
view.toggle_tray(False)    # close the tray
assert player.state is PlayerState.LOADED_STOPPED
assert view.label("track_count") == "/ 4"

view.toggle_play(True)     # play
view.press_next()          # second track
assert player.rank == 1
view.press_stop()          # stopped, disc still loaded
assert player.state is PlayerState.LOADED_STOPPED
```

A disc can also be built by hand:

```python
from cdplayer.disc import Disc

disc = Disc()
disc.add_track("First", 155, "cd1/track1.mp3")
disc.add_track("Second", 224, "cd1/track2.mp3")
print(len(disc), disc.track(0).title)
```

`populate_disc(disc)` in `cdplayer.player` fills a disc with the demo
content that `insert_disc()` puts in the tray.

## What it does not do

- It plays no sound and reads no media files: track URLs and the cover path
  are only stored and shown as text.
- There is no graphical window; `PlayerView` keeps widget state in memory.
- Random mode is recorded but does not change which track comes next.
- There is no disc collection or storage: the only disc is the demo one.

## Tests

```
pip install .[test]
pytest
```