"""File system utilities."""

from collections.abc import Iterable
from pathlib import Path


def ensure_directory(path: Path) -> Path:
    """Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure exists

    Returns:
        The directory path
    """
    path.mkdir(parents=True, exist_ok=True)
    return path


def stream_to_file(chunks: Iterable[bytes], output_path: Path) -> int:
    """Write an iterable of byte chunks to a file, replacing it.

    Args:
        chunks: Byte chunks, e.g. ``response.iter_content(...)``
        output_path: Destination file

    Returns:
        Number of bytes written
    """
    written = 0
    with open(output_path, "wb") as f:
        for chunk in chunks:
            if chunk:
                f.write(chunk)
                written += len(chunk)
    return written


def remove_quietly(path: Path) -> None:
    """Delete a file if it exists, ignoring filesystem errors."""
    try:
        path.unlink(missing_ok=True)
    except OSError:
        pass  # Leftover partial file is harmless
