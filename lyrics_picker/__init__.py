"""Resolve lyrics for local audio files and pick among provider results interactively."""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
