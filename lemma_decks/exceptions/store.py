"""JSON store exceptions."""

from .base import LemmaDecksException


class StoreError(LemmaDecksException):
    """Raised when a store cannot be written or encoded."""

    pass


class StoreCorruptedError(StoreError):
    """Raised when a store exists but its content cannot be decoded."""

    pass
