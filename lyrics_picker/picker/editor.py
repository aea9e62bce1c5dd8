from __future__ import annotations

import logging
import shlex
import shutil

import click

logger = logging.getLogger(__name__)


class ExternalEditor:
    """Edit text in an external editor program (blocking)."""

    def __init__(self, command: str):
        self.command = command

    @classmethod
    def detect(cls, command: str | None) -> "ExternalEditor | None":
        """Return an editor only when its program is on PATH."""
        if not command:
            return None
        program = shlex.split(command)[0]
        if shutil.which(program) is None:
            logger.info("Editor '%s' not found, editing disabled", program)
            return None
        return cls(command)

    def edit(self, text: str) -> str | None:
        try:
            return click.edit(text, editor=self.command, require_save=True, extension=".txt")
        except click.ClickException as e:
            logger.warning("Editing failed: %s", e)
            return None
