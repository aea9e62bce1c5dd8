from __future__ import annotations

import logging
import shlex
import subprocess
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


class AudioPlayer:
    """Fire-and-forget playback through an external command; one file at a time."""

    def __init__(self, command: str):
        self.command = shlex.split(command)
        self._proc: subprocess.Popen | None = None

    @property
    def playing(self) -> bool:
        return self._proc is not None and self._proc.poll() is None

    def play(self, path: Path) -> None:
        self.stop()
        logger.debug("Play: %s", path)
        try:
            self._proc = subprocess.Popen(
                [*self.command, str(path)],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as e:
            logger.warning("Cannot start player %r: %s", self.command, e)
            self._proc = None

    def stop(self) -> None:
        proc, self._proc = self._proc, None
        if proc is None or proc.poll() is not None:
            return
        logger.debug("Stop playing")
        proc.terminate()
        try:
            proc.wait(timeout=2)
        except subprocess.TimeoutExpired:
            proc.kill()

    def for_file(self, path: Path) -> "TrackPlayback":
        return TrackPlayback(player=self, path=path)


@dataclass(slots=True)
class TrackPlayback:
    player: AudioPlayer
    path: Path

    def play(self) -> None:
        self.player.play(self.path)

    def stop(self) -> None:
        self.player.stop()
