"""Data models for Lemma Decks."""

from .card import PARTS_OF_SPEECH, Card, part_of_speech_label
from .processing import DeckSummary, FetchResult
from .word import LemmaEntry, Meaning, Word, word_id

__all__ = [
    "word_id",
    "Word",
    "LemmaEntry",
    "Meaning",
    "Card",
    "PARTS_OF_SPEECH",
    "part_of_speech_label",
    "DeckSummary",
    "FetchResult",
]
