"""Validation-related exceptions."""

from .base import LemmaDecksException


class LemmaParseError(LemmaDecksException):
    """Raised when a lemma list line is malformed."""

    pass


class SetupError(LemmaDecksException):
    """Raised when setup checks fail (missing input file, API token, etc)."""

    pass
