from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Protocol

from lyrics_picker.sources.types import Variant, VariantSet


class OutcomeKind(enum.Enum):
    ADOPT = "adopt"
    ORIGINAL = "original"
    SKIP = "skip"


@dataclass(frozen=True, slots=True)
class PickOutcome:
    kind: OutcomeKind
    source: str | None = None

    @classmethod
    def adopt(cls, source: str) -> "PickOutcome":
        return cls(OutcomeKind.ADOPT, source)

    @classmethod
    def original(cls) -> "PickOutcome":
        return cls(OutcomeKind.ORIGINAL)

    @classmethod
    def skip(cls) -> "PickOutcome":
        return cls(OutcomeKind.SKIP)


class Editor(Protocol):
    def edit(self, text: str) -> str | None: ...


class PickerSession:
    """
    Cyclic cursor over a VariantSet plus the file's original lyrics.

    The cursor never leaves the set; only accept/keep_original/skip end a
    session, and those are decided by the caller.
    """

    def __init__(self, variants: VariantSet, original: str):
        if not variants:
            raise ValueError("PickerSession needs at least one variant")
        self.variants = variants
        self.original = original
        self._entries = list(variants.items())
        self.index = 0

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def current(self) -> tuple[str, Variant]:
        return self._entries[self.index]

    @property
    def current_source(self) -> str:
        return self._entries[self.index][0]

    @property
    def current_variant(self) -> Variant:
        return self._entries[self.index][1]

    @property
    def identical(self) -> bool:
        return self.current_variant.lyrics == self.original

    def advance(self) -> None:
        self.index = (self.index + 1) % len(self._entries)

    def accept(self) -> PickOutcome:
        return PickOutcome.adopt(self.current_source)

    def keep_original(self) -> PickOutcome:
        return PickOutcome.original()

    def skip(self) -> PickOutcome:
        return PickOutcome.skip()

    def edit(self, editor: Editor) -> bool:
        """Run the current text through `editor`; empty results are discarded."""
        edited = (editor.edit(self.current_variant.lyrics) or "").rstrip("\n")
        if not edited:
            return False
        self.current_variant.lyrics = edited
        return True
