import pytest

from cdplayer.states import PlayerState, PlayMode


@pytest.mark.parametrize(
    "state",
    [PlayerState.LOADED_STOPPED, PlayerState.PAUSED, PlayerState.PLAYING],
)
def test_disc_ready_when_loaded_and_closed(state):
    assert state.disc_ready() is True


@pytest.mark.parametrize("state", [PlayerState.EMPTY_STOPPED, PlayerState.OPEN_STOPPED])
def test_disc_not_ready_when_empty_or_open(state):
    assert state.disc_ready() is False


def test_five_player_states():
    ready = [PlayerState(state.value).disc_ready() for state in PlayerState]
    assert ready == [False, False, True, True, True]


def test_three_play_modes_are_distinct():
    modes = [PlayMode(mode.value) for mode in PlayMode]
    assert modes == [PlayMode.SEQUENTIAL, PlayMode.LOOP, PlayMode.RANDOM]


def test_states_round_trip_through_value():
    for state in PlayerState:
        assert PlayerState(state.value) is state