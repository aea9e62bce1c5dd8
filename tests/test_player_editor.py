from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import Mock, patch

import click

from lyrics_picker.media.player import AudioPlayer
from lyrics_picker.picker.editor import ExternalEditor


def test_play_spawns_player_and_stop_terminates():
    proc = Mock()
    proc.poll.return_value = None
    with patch("lyrics_picker.media.player.subprocess.Popen", return_value=proc) as popen:
        player = AudioPlayer("mpv --no-video")
        player.play(Path("/music/a.mp3"))
        assert popen.call_args.args[0] == ["mpv", "--no-video", "/music/a.mp3"]
        assert player.playing

        player.stop()
        proc.terminate.assert_called_once_with()
        assert not player.playing


def test_play_stops_previous_playback():
    first, second = Mock(), Mock()
    first.poll.return_value = None
    with patch("lyrics_picker.media.player.subprocess.Popen", side_effect=[first, second]):
        player = AudioPlayer("afplay")
        playback = player.for_file(Path("a.mp3"))
        playback.play()
        playback.play()
    first.terminate.assert_called_once_with()


def test_stop_kills_hanging_player():
    proc = Mock()
    proc.poll.return_value = None
    proc.wait.side_effect = subprocess.TimeoutExpired("afplay", 2)
    with patch("lyrics_picker.media.player.subprocess.Popen", return_value=proc):
        player = AudioPlayer("afplay")
        player.play(Path("a.mp3"))
        player.stop()
    proc.kill.assert_called_once_with()


def test_missing_player_binary_is_not_fatal():
    with patch("lyrics_picker.media.player.subprocess.Popen", side_effect=FileNotFoundError("nope")):
        player = AudioPlayer("no-such-player")
        player.play(Path("a.mp3"))
        assert not player.playing
        player.stop()


def test_stop_without_playback_is_noop():
    AudioPlayer("afplay").stop()


def test_editor_detect():
    with patch("lyrics_picker.picker.editor.shutil.which", return_value=None):
        assert ExternalEditor.detect("nano") is None
    with patch("lyrics_picker.picker.editor.shutil.which", return_value="/usr/bin/vim"):
        editor = ExternalEditor.detect("vim -n")
        assert editor is not None and editor.command == "vim -n"
    assert ExternalEditor.detect(None) is None
    assert ExternalEditor.detect("") is None


def test_editor_edit_uses_click():
    with patch("lyrics_picker.picker.editor.click.edit", return_value="new") as edit:
        assert ExternalEditor("vim").edit("old") == "new"
    assert edit.call_args.args[0] == "old"
    assert edit.call_args.kwargs["editor"] == "vim"


def test_editor_failure_gives_none():
    with patch("lyrics_picker.picker.editor.click.edit", side_effect=click.ClickException("vim: Editing failed")):
        assert ExternalEditor("vim").edit("old") is None
