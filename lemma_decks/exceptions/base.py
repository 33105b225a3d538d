"""Base exception classes for Lemma Decks."""


class LemmaDecksException(Exception):
    """Base exception for all Lemma Decks errors.

    Every error that should abort an operation inherits from this
    class so the CLI can report it and exit with a failure status.
    """

    pass
