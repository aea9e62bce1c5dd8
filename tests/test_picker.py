from __future__ import annotations

import pytest

from lyrics_picker.picker.picker import LyricsPicker
from lyrics_picker.picker.session import OutcomeKind, PickOutcome
from tests.mocks.fakes import FakeEditor, FakePlayback, FakeSurface

LEFT, RIGHT, UP, DOWN = "\x1b[D", "\x1b[C", "\x1b[A", "\x1b[B"


def _picker(keys, **kwargs):
    surface = FakeSurface(keys)
    return LyricsPicker(surface, source_order=["genius", "tekstowo"], **kwargs), surface


def test_left_adopts_shown_variant(make_track, variants):
    picker, surface = _picker([LEFT])
    assert picker.pick(make_track(), variants) == PickOutcome.adopt("genius")
    assert surface.entered == surface.exited == 1


def test_down_then_left_adopts_second_variant(make_track, variants):
    picker, _ = _picker([DOWN, LEFT])
    assert picker.pick(make_track(), variants) == PickOutcome.adopt("tekstowo")


def test_switching_wraps_around(make_track, variants):
    picker, surface = _picker([DOWN, DOWN, LEFT])
    assert picker.pick(make_track(), variants).source == "genius"
    assert [f.source_label for f in surface.frames] == ["Genius", "Tekstowo", "Genius"]


@pytest.mark.parametrize("moves", [0, 1, 2])
def test_right_keeps_original_from_any_position(make_track, variants, moves):
    picker, _ = _picker([DOWN] * moves + [RIGHT])
    assert picker.pick(make_track(), variants).kind is OutcomeKind.ORIGINAL


@pytest.mark.parametrize("moves", [0, 1, 2])
def test_up_skips_from_any_position(make_track, variants, moves):
    picker, _ = _picker([DOWN] * moves + [UP])
    assert picker.pick(make_track(), variants).kind is OutcomeKind.SKIP


def test_unknown_keys_are_ignored(make_track, variants):
    picker, surface = _picker(["x", "\x1b[Z", "q", LEFT])
    assert picker.pick(make_track(), variants).source == "genius"
    assert len(surface.frames) == 4


def test_play_and_stop_do_not_change_state(make_track, variants):
    playback = FakePlayback()
    picker, surface = _picker(["p", "s", "P", LEFT])
    assert picker.pick(make_track(), variants, playback=playback) == PickOutcome.adopt("genius")
    assert playback.events == ["play", "stop", "play"]
    assert {f.source_label for f in surface.frames} == {"Genius"}


def test_play_without_playback_is_harmless(make_track, variants):
    picker, _ = _picker(["p", "s", RIGHT])
    assert picker.pick(make_track(), variants).kind is OutcomeKind.ORIGINAL


def test_edit_replaces_text_and_restores_screen(make_track, variants):
    editor = FakeEditor("fixed lyrics")
    picker, surface = _picker(["e", LEFT], editor=editor)
    assert picker.pick(make_track(), variants).source == "genius"
    assert variants["genius"].lyrics == "fixed lyrics"
    assert surface.frames[-1].lyrics == "fixed lyrics"
    # editor runs outside the picker screen
    assert surface.entered == surface.exited == 2


def test_edit_is_disabled_without_editor(make_track, variants):
    picker, surface = _picker(["e", LEFT])
    picker.pick(make_track(), variants)
    assert variants["genius"].lyrics == "Hey Jude, don't make it bad"
    assert surface.entered == 1
    assert surface.frames[0].can_edit is False


def test_frames_flag_identical_lyrics(make_track, variants):
    track = make_track(lyrics="Hey Jude, don't be afraid")
    picker, surface = _picker([DOWN, RIGHT])
    picker.pick(track, variants)
    assert [f.identical for f in surface.frames] == [False, True]


def test_frame_contents(make_track, variants):
    track = make_track(path="/music/hey_jude.mp3", lyrics="old")
    picker, surface = _picker([DOWN, RIGHT], labels={"tekstowo": "Tekstowo.pl"}, editor=FakeEditor(None))
    picker.pick(track, variants)
    first, second = surface.frames
    assert first.color_index == 0 and second.color_index == 1
    assert second.source_label == "Tekstowo.pl"
    assert second.artist == "Beatles"
    assert second.filename == "hey_jude.mp3"
    assert second.original_lyrics == "old"
    assert second.can_edit is True


def test_screen_is_released_when_reading_keys_fails(make_track, variants):
    picker, surface = _picker([])
    with pytest.raises(IndexError):
        picker.pick(make_track(), variants)
    assert surface.exited == 1
