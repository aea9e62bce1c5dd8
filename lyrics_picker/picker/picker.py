from __future__ import annotations

import logging
from typing import Protocol, Sequence

from lyrics_picker.media.tags import AudioTrack
from lyrics_picker.render.ansi import PickerFrame
from lyrics_picker.sources.types import VariantSet

from .keys import Action, decode_key
from .session import Editor, PickerSession, PickOutcome

logger = logging.getLogger(__name__)


class Surface(Protocol):
    def enter(self) -> None: ...

    def exit(self) -> None: ...

    def render(self, frame: PickerFrame) -> None: ...

    def read_key(self) -> str: ...


class Playback(Protocol):
    def play(self) -> None: ...

    def stop(self) -> None: ...


class LyricsPicker:
    """
    Interactive chooser between the lyrics variants found for a track and the
    lyrics already stored in it.

    Keys: LEFT adopt the shown variant, RIGHT keep the original, UP skip the
    file, DOWN show the next variant, `e` edit (when an editor is available),
    `p`/`s` play/stop the track.
    """

    def __init__(
        self,
        surface: Surface,
        *,
        source_order: Sequence[str] = (),
        labels: dict[str, str] | None = None,
        editor: Editor | None = None,
        playback: Playback | None = None,
    ):
        self.surface = surface
        self.source_order = list(source_order)
        self.labels = labels or {}
        self.editor = editor
        self.playback = playback

    @property
    def can_edit(self) -> bool:
        return self.editor is not None

    def pick(self, track: AudioTrack, variants: VariantSet, playback: Playback | None = None) -> PickOutcome:
        session = PickerSession(variants, track.lyrics)
        self.surface.enter()
        try:
            return self._loop(session, track, playback or self.playback)
        finally:
            self.surface.exit()

    def _loop(self, session: PickerSession, track: AudioTrack, playback: Playback | None) -> PickOutcome:
        while True:
            self.surface.render(self.frame(session, track))
            action = decode_key(self.surface.read_key())
            logger.debug("Picker action: %s (source=%s)", action, session.current_source)

            if action is Action.ACCEPT:
                return session.accept()
            if action is Action.ORIGINAL:
                return session.keep_original()
            if action is Action.SKIP:
                return session.skip()
            if action is Action.NEXT:
                session.advance()
            elif action is Action.EDIT:
                self._edit(session)
            elif action is Action.PLAY and playback:
                playback.play()
            elif action is Action.STOP and playback:
                playback.stop()

    def _edit(self, session: PickerSession) -> None:
        if self.editor is None:
            return
        # the editor needs the real terminal
        self.surface.exit()
        try:
            session.edit(self.editor)
        finally:
            self.surface.enter()

    def frame(self, session: PickerSession, track: AudioTrack) -> PickerFrame:
        source, variant = session.current
        try:
            color_index = self.source_order.index(source)
        except ValueError:
            color_index = session.index
        return PickerFrame(
            source_label=self.labels.get(source, source.capitalize()),
            color_index=color_index,
            title=variant.title,
            artist=variant.artist,
            lyrics=variant.lyrics,
            track_title=track.title,
            track_artist=track.artist,
            filename=track.filename,
            original_lyrics=track.lyrics,
            identical=session.identical,
            can_edit=self.can_edit,
        )
