"""Custom exceptions for Lemma Decks."""

from .base import LemmaDecksException
from .fetch import AudioDownloadError, MeaningFetchError, PhoneticLookupError
from .store import StoreCorruptedError, StoreError
from .validation import LemmaParseError, SetupError

__all__ = [
    "LemmaDecksException",
    "LemmaParseError",
    "SetupError",
    "StoreError",
    "StoreCorruptedError",
    "MeaningFetchError",
    "AudioDownloadError",
    "PhoneticLookupError",
]
