"""
Exceptions raised while validating a human move.

None of these are raised after the board has been touched: every check runs
before a choice is committed.
"""
from __future__ import annotations


class DraughtsError(Exception):
    """Base class for recoverable game errors."""


class InvalidNotationError(DraughtsError, ValueError):
    """Square text is not a letter A-H followed by a digit 1-8."""


class IllegalSelectionError(DraughtsError):
    """The selected square cannot be played this turn."""


class OutOfTurnError(IllegalSelectionError):
    pass


class NotYourPieceError(IllegalSelectionError):
    pass


class CaptureRequiredError(IllegalSelectionError):
    """Another piece has a capture, and capturing is mandatory."""


class NoLegalMoveError(IllegalSelectionError):
    pass


class InvalidChoiceError(DraughtsError, ValueError):
    """Option number outside the listed range."""
