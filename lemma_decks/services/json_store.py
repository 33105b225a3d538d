"""JSON document persistence with pluggable storage backends."""

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from lemma_decks.exceptions import StoreCorruptedError, StoreError
from lemma_decks.interfaces import StorageBackend

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FileStorage:
    """Store documents as UTF-8 files in a directory.

    Implements StorageBackend protocol.
    """

    def __init__(self, base_dir: Path):
        """Initialize with the directory holding the documents.

        Args:
            base_dir: Directory containing the JSON files.
        """
        self.base_dir = Path(base_dir)

    def path_for(self, name: str) -> Path:
        return self.base_dir / name

    def read_text(self, name: str) -> str | None:
        try:
            return self.path_for(name).read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning(f"Cannot read {self.path_for(name)}: {e}")
            return None

    def write_text(self, name: str, text: str) -> None:
        self.base_dir.mkdir(parents=True, exist_ok=True)
        self.path_for(name).write_text(text, encoding="utf-8")


class MemoryStorage:
    """Keep documents in a dict (used by tests and dry runs).

    Implements StorageBackend protocol.
    """

    def __init__(self, documents: dict[str, str] | None = None):
        self.documents: dict[str, str] = dict(documents or {})
        self.writes = 0

    def read_text(self, name: str) -> str | None:
        return self.documents.get(name)

    def write_text(self, name: str, text: str) -> None:
        self.documents[name] = text
        self.writes += 1


class JsonStore:
    """Read-with-default / overwrite-whole-document JSON persistence."""

    def __init__(self, backend: StorageBackend):
        """Initialize the store.

        Args:
            backend: Where the documents live
        """
        self.backend = backend

    def load(self, default: T, name: str) -> T:
        """Load a document, falling back to ``default`` when it is absent.

        Args:
            default: Value returned when the document does not exist; its
                type (list or dict) is the shape the content must have
            name: Document name

        Returns:
            The decoded document, or ``default``

        Raises:
            StoreCorruptedError: If the document exists but is not valid
                UTF-8 or JSON, or does not have the shape of ``default``.
        """
        try:
            text = self.backend.read_text(name)
        except UnicodeDecodeError as e:
            raise StoreCorruptedError(f"{name} is not valid UTF-8: {e}") from e
        if text is None:
            return default
        if not text.strip():
            logger.warning(f"{name} is empty, using default value")
            return default

        try:
            value: Any = json.loads(text)
        except ValueError as e:
            raise StoreCorruptedError(f"{name} is not valid JSON: {e}") from e

        if default is not None and not isinstance(value, type(default)):
            raise StoreCorruptedError(
                f"{name} holds a {type(value).__name__}, expected {type(default).__name__}"
            )
        return value

    def save(self, value: Any, name: str) -> None:
        """Serialize ``value`` and replace the whole document.

        Args:
            value: JSON-serializable value
            name: Document name

        Raises:
            StoreError: If encoding or writing fails.
        """
        try:
            text = json.dumps(
                value,
                indent="\t",
                ensure_ascii=False,
                sort_keys=isinstance(value, dict),
            )
        except (TypeError, ValueError) as e:
            raise StoreError(f"Cannot encode {name}: {e}") from e

        try:
            self.backend.write_text(name, text)
        except OSError as e:
            raise StoreError(f"Cannot write {name}: {e}") from e
