"""Protocol for named text storage used by the JSON stores."""

from typing import Protocol


class StorageBackend(Protocol):
    """Interface for a place that holds whole text documents by name.

    The JSON stores read and rewrite complete documents; a backend only
    has to support those two operations.
    """

    def read_text(self, name: str) -> str | None:
        """Read a document.

        Args:
            name: Document name (e.g. "meanings.json")

        Returns:
            The document text, or None if it does not exist or cannot be read.
        """
        ...

    def write_text(self, name: str, text: str) -> None:
        """Replace a document with new text.

        Args:
            name: Document name
            text: Full new content

        Raises:
            OSError: If the document cannot be written.
        """
        ...
