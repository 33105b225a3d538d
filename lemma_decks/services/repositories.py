"""Repositories over the meanings and IPA JSON stores."""

import logging

from lemma_decks.models import Meaning

from .json_store import JsonStore

logger = logging.getLogger(__name__)


class MeaningRepository:
    """Ordered, identity-key-unique collection of meanings.

    Every merge re-reads the stored document, appends entries whose
    identity key is not present yet and rewrites the document, so
    progress survives a crash between batches.
    """

    def __init__(self, store: JsonStore, name: str = "meanings.json"):
        """Initialize the repository.

        Args:
            store: JSON store holding the document
            name: Document name
        """
        self.store = store
        self.name = name

    def load(self) -> list[Meaning]:
        """Load all stored meanings, dropping duplicate identity keys."""
        raw = self.store.load([], self.name)
        meanings: list[Meaning] = []
        seen: set[str] = set()
        for item in raw:
            if not isinstance(item, dict):
                logger.warning(f"Skipping non-object entry in {self.name}: {item!r}")
                continue
            meaning = Meaning.from_dict(item)
            if meaning.id in seen:
                continue
            seen.add(meaning.id)
            meanings.append(meaning)
        return meanings

    def by_id(self) -> dict[str, Meaning]:
        return {meaning.id: meaning for meaning in self.load()}

    def keys(self) -> set[str]:
        return {meaning.id for meaning in self.load()}

    def merge(self, new_meanings: list[Meaning]) -> int:
        """Append meanings with unseen identity keys and persist.

        Existing entries win over new ones with the same key.

        Args:
            new_meanings: Meanings to add

        Returns:
            Number of meanings actually added
        """
        meanings = self.load()
        seen = {meaning.id for meaning in meanings}
        added = 0
        for meaning in new_meanings:
            if meaning.id in seen:
                logger.debug(f"Ignoring duplicate meaning for {meaning.id}")
                continue
            seen.add(meaning.id)
            meanings.append(meaning)
            added += 1

        self.store.save([meaning.to_dict() for meaning in meanings], self.name)
        return added


class IpaRepository:
    """Mapping of identity key to phonetic transcription."""

    def __init__(self, store: JsonStore, name: str = "ipas.json"):
        self.store = store
        self.name = name
        self._ipas: dict[str, str] | None = None

    def load(self) -> dict[str, str]:
        """Load the map from the store (cached after the first call)."""
        if self._ipas is None:
            raw = self.store.load({}, self.name)
            self._ipas = {
                str(key): "" if value is None else str(value) for key, value in raw.items()
            }
        return self._ipas

    def contains(self, key: str) -> bool:
        return key in self.load()

    def get(self, key: str) -> str | None:
        return self.load().get(key)

    def set(self, key: str, ipa: str) -> None:
        """Record a transcription and rewrite the whole map."""
        ipas = self.load()
        ipas[key] = ipa
        self.store.save(ipas, self.name)
