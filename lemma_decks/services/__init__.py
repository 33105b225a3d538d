"""Business logic services for Lemma Decks."""

from .audio_service import AudioService
from .deck_service import DeckService
from .image_service import ImageService
from .json_store import FileStorage, JsonStore, MemoryStorage
from .lemma_parser import LemmaParserService
from .meaning_service import MeaningService
from .phonetic_service import PhoneticService
from .repositories import IpaRepository, MeaningRepository

__all__ = [
    "LemmaParserService",
    "FileStorage",
    "MemoryStorage",
    "JsonStore",
    "MeaningRepository",
    "IpaRepository",
    "MeaningService",
    "PhoneticService",
    "AudioService",
    "ImageService",
    "DeckService",
]
