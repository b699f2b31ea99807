from cdplayer.sound import SoundOutput


def test_defaults():
    out = SoundOutput()
    assert out.volume == 1.0
    assert out.muted is False


def test_set_volume_kept():
    out = SoundOutput()
    out.set_volume(0.25)
    assert out.volume == 0.25
    assert out.effective_volume == 0.25


def test_volume_is_bounded():
    out = SoundOutput()
    out.set_volume(3.0)
    assert out.volume == 1.0
    out.set_volume(-2.0)
    assert out.volume == 0.0


def test_mute_and_unmute_keep_volume():
    out = SoundOutput(0.5)
    out.mute()
    assert out.muted is True
    assert out.effective_volume == 0.0
    assert out.volume == 0.5
    out.unmute()
    assert out.muted is False
    assert out.effective_volume == 0.5