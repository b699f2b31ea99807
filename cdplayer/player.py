"""The disc player: a state machine joining tray, cell, sound output and panel."""

from __future__ import annotations

import logging
from typing import Optional

from .cell import Cell
from .disc import NO_TRACK, Disc
from .sound import SoundOutput
from .states import PlayerState, PlayMode
from .track import Track
from .tray import OccupancyState, Tray
from .view import PlayerView

log = logging.getLogger(__name__)

_TRANSPORT = ("play_pause", "stop", "previous", "next", "restart")


def populate_disc(disc: Disc) -> Disc:
    """Fill ``disc`` with the demonstration tracks and details; return it."""
    disc.add_track("monCD1- titre - 1", 155, "cd1/titre1/RossBugden-Notturno.mp3")
    disc.add_track("monCD1- titre - 2", 224, "cd1/titre2/LCE2C-RiversideII.MP3")
    disc.add_track("monCD1- titre - 3", 204, "cd1/titre3/ZeroProject-PassMeBy.mp3")
    disc.add_track("monCD1- titre - 4", 205, "cd1/titre4/NovaNoma-Gaia.mp3")
    disc.duration = 788
    disc.title = "intitule CD 1"
    disc.cover = ":/imageCD/CDs/cd1/pochette_cd1.jpg"
    disc.genre = "libre de droit"
    return disc


class CdPlayer:
    """A disc player driven by a control panel.

    Actions that do not fit the current state are ignored, as on a real player.
    """

    def __init__(
        self,
        view: Optional[PlayerView] = None,
        sound: Optional[SoundOutput] = None,
    ) -> None:
        self.view = view if view is not None else PlayerView()
        self.view.attach(self)
        self.tray = Tray(self)
        self.cell = Cell(
            self,
            on_position_changed=self.on_cell_position_changed,
            on_duration_changed=self.on_cell_duration_changed,
            on_media_finished=self.on_media_finished,
        )
        self.sound = sound
        self.state = PlayerState.EMPTY_STOPPED
        self.mode = PlayMode.SEQUENTIAL
        self.rank = NO_TRACK
        self.current_track: Optional[Track] = None

        demo = populate_disc(Disc())
        log.debug("disc title: %s", demo.title)
        log.debug("genre: %s", demo.genre)
        log.debug("number of tracks: %d", len(demo))
        for number, track in enumerate(demo.tracks, start=1):
            log.debug("track %d -> %s - %ds - %s", number, track.title, track.duration, track.url)

    # state

    @property
    def disc(self) -> Optional[Disc]:
        """The disc held by the tray, if any."""
        return self.tray.disc

    @property
    def disc_ready(self) -> bool:
        """True when a disc is inserted and the tray is closed."""
        return self.state.disc_ready()

    def select_track(self, rank: int) -> None:
        """Make the track at ``rank`` current, or clear it if there is no such track."""
        disc = self.disc
        if disc is not None and 0 <= rank < len(disc):
            self.rank = rank
            self.current_track = disc.track(rank)
        else:
            self.rank = NO_TRACK
            self.current_track = None

    def _forget_track(self) -> None:
        self.current_track = None
        self.rank = NO_TRACK
        self.cell.set_source(None)

    def _load_track(self, rank: int) -> None:
        self.select_track(rank)
        self.cell.set_source(self.current_track.url if self.current_track else None)
        if self.current_track is not None:
            self.view.set_label("rank", str(self.rank + 1))

    def _set_transport(self, enabled: bool) -> None:
        for name in _TRANSPORT:
            self.view.set_enabled(name, enabled)

    def _clear_disc_labels(self) -> None:
        self.view.set_label("disc_duration", "00:00")
        self.view.set_label("rank", "--")
        self.view.set_label("track_count", "/--")

    # transport

    def play(self) -> None:
        if self.state in (PlayerState.LOADED_STOPPED, PlayerState.PAUSED):
            log.debug("play: playback started")
            self.state = PlayerState.PLAYING
            self.cell.start()
        else:
            log.debug("play: ignored in state %s", self.state.value)

    def stop(self) -> None:
        if self.state in (PlayerState.PLAYING, PlayerState.PAUSED):
            log.debug("stop: playback stopped")
            self.cell.stop()
            self.state = PlayerState.LOADED_STOPPED
        else:
            log.debug("stop: ignored in state %s", self.state.value)

    def pause(self) -> None:
        if self.state is PlayerState.PLAYING:
            log.debug("pause: playback paused")
            self.cell.stop()
            self.state = PlayerState.PAUSED
        else:
            log.debug("pause: ignored in state %s", self.state.value)

    def previous(self) -> None:
        if self.state in (PlayerState.PLAYING, PlayerState.PAUSED) and self.rank > 0:
            self._load_track(self.rank - 1)
            log.debug("previous: rank = %d", self.rank)
        else:
            log.debug("previous: ignored (start of disc or wrong state)")

    def next(self) -> None:
        disc = self.disc
        if (
            self.state in (PlayerState.PLAYING, PlayerState.PAUSED)
            and disc is not None
            and self.rank + 1 < len(disc)
        ):
            self._load_track(self.rank + 1)
            log.debug("next: rank = %d", self.rank)
        else:
            log.debug("next: ignored (end of disc or wrong state)")

    def restart(self) -> None:
        if self.state in (PlayerState.PLAYING, PlayerState.PAUSED):
            log.debug("restart: back to the start of the current track")
            self.cell.rewind()
        else:
            log.debug("restart: ignored in state %s", self.state.value)

    # tray

    def _show_open(self, disc_label: str, status: str) -> None:
        self.view.set_enabled("insert", True)
        self.view.set_enabled("eject", True)
        self._set_transport(False)
        self.view.set_label("disc", disc_label)
        self.view.elapsed_changed(0)
        self.view.show_message(status)

    def open_tray(self) -> None:
        if self.state is PlayerState.EMPTY_STOPPED:
            self.tray.open()
            self.state = PlayerState.OPEN_STOPPED
            self._show_open("PAS de CD", "OUVERT_CHARGE")
        elif self.state in (PlayerState.LOADED_STOPPED, PlayerState.PAUSED):
            self.tray.open()
            self._forget_track()
            self.state = PlayerState.OPEN_STOPPED
            self._show_open("CD RETIRÉ", "OUVERT_ARRET")
        elif self.state is PlayerState.PLAYING:
            self.cell.stop()
            self.tray.open()
            self._forget_track()
            self.state = PlayerState.OPEN_STOPPED
            self.view.show_message("OUVERT_ARRET")
        else:
            log.debug("open_tray: ignored in state %s", self.state.value)
            return
        log.debug("open_tray: tray open")

    def close_tray(self) -> None:
        if self.state is not PlayerState.OPEN_STOPPED:
            log.debug("close_tray: ignored in state %s", self.state.value)
            return
        self.tray.close()
        disc = self.disc
        if self.tray.occupancy is OccupancyState.OCCUPIED and disc is not None:
            self.state = PlayerState.LOADED_STOPPED
            self._load_track(0)
            self.view.set_enabled("insert", False)
            self.view.set_enabled("eject", False)
            self._set_transport(True)
            self.view.set_label("disc", "CD INSÉRÉ")
            self.view.set_label("rank", "1")
            self.view.set_label("track_count", f"/ {len(disc)}")
            self.view.set_label("disc_duration", disc.formatted_duration())
            self.view.elapsed_changed(0)
            self.view.show_message("CHARGE_ARRET")
        else:
            self.state = PlayerState.EMPTY_STOPPED
            self.current_track = None
            self.rank = NO_TRACK
            self.view.set_label("disc", "CD FERMÉ (VIDE)")
            self._clear_disc_labels()
            self.view.elapsed_changed(0)
            self.view.show_message("FERMÉ - VIDE ARRET")
        log.debug("close_tray: tray closed, state = %s", self.state.value)

    def insert_disc(self) -> None:
        if self.state is not PlayerState.OPEN_STOPPED:
            log.debug("insert_disc: ignored in state %s", self.state.value)
            return
        if self.tray.occupancy is not OccupancyState.EMPTY:
            log.debug("insert_disc: tray already holds a disc")
            return
        disc = populate_disc(Disc())
        self.tray.insert(disc)
        self.view.set_enabled("insert", True)
        self.view.set_enabled("eject", False)
        self._set_transport(False)
        self.view.set_label("disc", "CD INSÉRÉ")
        self.view.set_label("title", disc.title)
        self.view.set_label("rank", "1")
        self.view.set_label("track_count", f"/ {len(disc)}")
        self.view.set_label("disc_duration", disc.formatted_duration())
        self.view.set_label("genre", disc.genre)
        self.view.set_label("image", disc.cover)
        self.view.show_message("FERME_CHARGE, CD inséré")
        log.debug("insert_disc: disc inserted")

    def eject_disc(self) -> None:
        if self.state is not PlayerState.OPEN_STOPPED:
            log.debug("eject_disc: ignored in state %s", self.state.value)
            return
        if self.tray.occupancy is not OccupancyState.OCCUPIED:
            log.debug("eject_disc: tray is empty")
            return
        self.tray.remove()
        self.view.set_enabled("insert", False)
        self.view.set_enabled("eject", True)
        self._set_transport(False)
        self.view.set_label("disc", "PAS DE CD")
        self.view.set_label("title", "")
        self._clear_disc_labels()
        self.view.elapsed_changed(0)
        self.view.set_label("genre", "")
        self.view.set_label("image", "")
        self.view.show_message("TIROIR VIDE")
        log.debug("eject_disc: disc removed")

    # modes

    def loop_mode(self) -> None:
        self.mode = PlayMode.LOOP

    def sequential_mode(self) -> None:
        self.mode = PlayMode.SEQUENTIAL

    def random_mode(self) -> None:
        self.mode = PlayMode.RANDOM

    # sound

    def mute(self) -> None:
        if self.sound is not None:
            self.sound.mute()
        log.debug("mute: sound off")

    def unmute(self) -> None:
        if self.sound is not None:
            self.sound.unmute()
        log.debug("unmute: sound on")

    def set_volume(self, volume: int) -> None:
        """Take a slider volume from 0 to 100 and pass it to the sound output."""
        log.debug("set_volume: %s", volume)
        self.on_sound_volume_changed(volume / 100)

    # component notifications

    def on_sound_volume_changed(self, volume: float) -> None:
        if self.sound is not None:
            self.sound.set_volume(volume)
        else:
            log.warning("no sound output connected")

    def on_cell_duration_changed(self, duration: int) -> None:
        self.view.elapsed_changed(duration)

    def on_cell_position_changed(self, position: int) -> None:
        self.view.elapsed_changed(position)

    def on_media_finished(self) -> None:
        """At the end of a track, replay it in loop mode, else move on."""
        if self.mode is PlayMode.LOOP:
            self.restart()
        else:
            self.next()

    def choose_media_folder(self, folder: Optional[str]) -> None:
        """Use ``folder`` as the cell's media source; an empty choice changes nothing."""
        if folder:
            self.cell.set_source(folder)
            log.debug("media folder set to %s", folder)
        else:
            log.debug("no media folder chosen")