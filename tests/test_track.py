import pytest

from cdplayer.track import Track


def test_default_track_is_empty():
    track = Track()
    assert (track.title, track.duration, track.url) == ("", 0, "")


def test_fields_are_kept():
    track = Track("monCD1- titre - 1", 155, "cd1/titre1/RossBugden-Notturno.mp3")
    assert track.title == "monCD1- titre - 1"
    assert track.duration == 155
    assert track.url == "cd1/titre1/RossBugden-Notturno.mp3"


def test_fields_can_be_changed():
    track = Track()
    track.title = "other"
    track.duration = 42
    track.url = "x.mp3"
    assert track == Track("other", 42, "x.mp3")


def test_formatted_duration_zero():
    assert Track().formatted_duration() == "00:00"


def test_formatted_duration_round_trips_to_seconds():
    for duration in (0, 59, 60, 155, 224, 3599):
        minutes, seconds = Track(duration=duration).formatted_duration().split(":")
        assert int(minutes) * 60 + int(seconds) == duration
        assert len(seconds) == 2


def test_negative_duration_rejected():
    with pytest.raises(ValueError):
        Track("bad", -1, "")