"""Exception types raised by termtris."""

from __future__ import annotations


class TermtrisError(Exception):
    """Base class for all termtris errors."""


class TerminalInitError(TermtrisError):
    """The terminal session could not be started."""


class InputError(TermtrisError):
    """The input source reported an error; the game cannot continue."""


class GameFinishedError(TermtrisError, RuntimeError):
    """An engine operation was requested after the game ended."""
