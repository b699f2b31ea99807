import pytest

from cdplayer.disc import NO_TRACK, Disc
from cdplayer.player import CdPlayer, populate_disc
from cdplayer.sound import SoundOutput
from cdplayer.states import PlayerState, PlayMode
from cdplayer.view import PlayerView


@pytest.fixture
def player():
    return CdPlayer(PlayerView(), SoundOutput())


def loaded(p):
    p.open_tray()
    p.insert_disc()
    p.close_tray()
    return p


def test_populate_disc():
    disc = populate_disc(Disc())
    assert len(disc) == 4
    assert disc.duration == 788
    assert disc.title == "intitule CD 1"
    assert disc.genre == "libre de droit"
    assert disc.track(0).title == "monCD1- titre - 1"
    assert disc.track(0).duration == 155
    assert disc.track(3).url == "cd1/titre4/NovaNoma-Gaia.mp3"


def test_initial_state(player):
    assert player.state is PlayerState.EMPTY_STOPPED
    assert player.mode is PlayMode.SEQUENTIAL
    assert player.rank == NO_TRACK
    assert player.disc is None
    assert player.view.player is player
    assert not player.disc_ready


def test_open_from_empty(player):
    player.open_tray()
    assert player.state is PlayerState.OPEN_STOPPED
    assert player.tray.is_open
    assert player.view.is_enabled("insert")
    assert not player.view.is_enabled("play_pause")
    assert player.view.label("disc") == "PAS de CD"
    assert player.view.status == "OUVERT_CHARGE"


def test_insert_disc(player):
    player.open_tray()
    player.insert_disc()
    assert player.disc is not None
    assert player.view.label("title") == "intitule CD 1"
    assert player.view.label("genre") == "libre de droit"
    assert player.view.label("disc_duration") == player.disc.formatted_duration()
    assert player.view.status == "FERME_CHARGE, CD inséré"
    assert not player.view.is_enabled("eject")


def test_insert_twice_keeps_first_disc(player):
    player.open_tray()
    player.insert_disc()
    first = player.disc
    player.insert_disc()
    assert player.disc is first


def test_insert_ignored_when_closed(player):
    player.insert_disc()
    assert player.disc is None


def test_close_with_disc(player):
    loaded(player)
    assert player.state is PlayerState.LOADED_STOPPED
    assert player.disc_ready
    assert player.rank == 0
    assert player.current_track == player.disc.track(0)
    assert player.cell.source == player.disc.track(0).url
    assert player.view.status == "CHARGE_ARRET"
    assert player.view.label("rank") == "1"
    assert player.view.label("track_count") == f"/ {len(player.disc)}"
    assert player.view.is_enabled("play_pause")
    assert not player.view.is_enabled("insert")


def test_close_empty(player):
    player.open_tray()
    player.close_tray()
    assert player.state is PlayerState.EMPTY_STOPPED
    assert player.rank == NO_TRACK
    assert player.view.status == "FERMÉ - VIDE ARRET"
    assert player.view.label("rank") == "--"
    assert player.view.label("disc_duration") == "00:00"


def test_close_ignored_when_not_open(player):
    player.close_tray()
    assert player.state is PlayerState.EMPTY_STOPPED
    assert player.view.status == ""


def test_play_pause_stop(player):
    loaded(player)
    player.play()
    assert player.state is PlayerState.PLAYING
    assert player.cell.running
    player.pause()
    assert player.state is PlayerState.PAUSED
    assert not player.cell.running
    player.play()
    player.stop()
    assert player.state is PlayerState.LOADED_STOPPED
    assert not player.cell.running


def test_play_ignored_without_disc(player):
    player.play()
    assert player.state is PlayerState.EMPTY_STOPPED
    assert not player.cell.running


def test_pause_ignored_when_stopped(player):
    loaded(player)
    player.pause()
    assert player.state is PlayerState.LOADED_STOPPED


def test_next_and_previous(player):
    loaded(player)
    player.play()
    player.next()
    assert player.rank == 1
    assert player.cell.source == player.disc.track(1).url
    assert player.view.label("rank") == "2"
    player.previous()
    assert player.rank == 0
    player.previous()
    assert player.rank == 0


def test_next_stops_at_last_track(player):
    loaded(player)
    player.play()
    for _ in range(len(player.disc) + 2):
        player.next()
    assert player.rank == len(player.disc) - 1


def test_next_ignored_when_stopped(player):
    loaded(player)
    player.next()
    assert player.rank == 0


def test_restart_rewinds(player):
    loaded(player)
    player.play()
    player.cell.advance(1500)
    assert player.cell.position == 1500
    player.restart()
    assert player.cell.position == 0


def test_open_while_playing(player):
    loaded(player)
    player.play()
    player.open_tray()
    assert player.state is PlayerState.OPEN_STOPPED
    assert not player.cell.running
    assert player.rank == NO_TRACK
    assert player.current_track is None
    assert player.cell.source is None
    assert player.view.status == "OUVERT_ARRET"


def test_open_when_loaded(player):
    loaded(player)
    player.open_tray()
    assert player.view.label("disc") == "CD RETIRÉ"
    assert player.view.status == "OUVERT_ARRET"
    assert player.disc is not None


def test_eject(player):
    loaded(player)
    player.open_tray()
    player.eject_disc()
    assert player.disc is None
    assert player.view.status == "TIROIR VIDE"
    assert player.view.label("title") == ""
    assert player.view.label("disc") == "PAS DE CD"
    player.close_tray()
    assert player.state is PlayerState.EMPTY_STOPPED


def test_eject_ignored_when_empty(player):
    player.open_tray()
    player.eject_disc()
    assert player.view.status == "OUVERT_CHARGE"


def test_modes(player):
    player.loop_mode()
    assert player.mode is PlayMode.LOOP
    player.random_mode()
    assert player.mode is PlayMode.RANDOM
    player.sequential_mode()
    assert player.mode is PlayMode.SEQUENTIAL


def test_media_finished_sequential_moves_on(player):
    loaded(player)
    player.play()
    player.cell.set_duration(3000)
    player.cell.advance(3000)
    assert player.rank == 1


def test_media_finished_loop_replays(player):
    loaded(player)
    player.loop_mode()
    player.play()
    player.cell.set_duration(3000)
    player.cell.advance(3000)
    assert player.rank == 0
    assert player.cell.position == 0


def test_position_updates_view(player):
    loaded(player)
    player.play()
    player.cell.advance(700)
    assert player.view.elapsed == 700


def test_sound_controls(player):
    player.mute()
    assert player.sound.muted
    player.unmute()
    assert not player.sound.muted
    player.on_sound_volume_changed(0.25)
    assert player.sound.volume == 0.25
    player.set_volume(50)
    assert player.sound.volume == pytest.approx(0.5)


def test_select_track_out_of_range(player):
    loaded(player)
    player.select_track(len(player.disc))
    assert player.rank == NO_TRACK
    assert player.current_track is None
    player.select_track(2)
    assert player.current_track == player.disc.track(2)


def test_choose_media_folder(player):
    player.choose_media_folder("media/folder")
    assert player.cell.source == "media/folder"
    player.choose_media_folder("")
    assert player.cell.source == "media/folder"


def test_view_drives_player(player):
    view = player.view
    view.toggle_tray(True)
    view.press_insert()
    view.toggle_tray(False)
    view.toggle_play(True)
    assert player.state is PlayerState.PLAYING
    view.press_stop()
    assert player.state is PlayerState.LOADED_STOPPED
    assert not view.play_checked