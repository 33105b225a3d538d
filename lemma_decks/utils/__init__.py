"""Utility functions for Lemma Decks."""

from .file_utils import ensure_directory, remove_quietly, stream_to_file
from .retry import RetryPolicy
from .task_pool import run_bounded
from .text_utils import strip_code_fence

__all__ = [
    "ensure_directory",
    "remove_quietly",
    "stream_to_file",
    "RetryPolicy",
    "run_bounded",
    "strip_code_fence",
]
