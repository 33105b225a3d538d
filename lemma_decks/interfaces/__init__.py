"""Interface protocols for Lemma Decks."""

from .presenter import PresenterProtocol
from .progress import ProgressCallback
from .storage import StorageBackend

__all__ = ["PresenterProtocol", "ProgressCallback", "StorageBackend"]
