"""Service for looking up phonetic transcriptions in a dictionary API."""

import logging
import time
from collections.abc import Callable
from typing import Any
from urllib.parse import quote

import requests

from lemma_decks.config import LemmaDecksConfig
from lemma_decks.exceptions import PhoneticLookupError
from lemma_decks.interfaces import ProgressCallback
from lemma_decks.models import FetchResult, LemmaEntry

from .json_store import FileStorage, JsonStore
from .repositories import IpaRepository

logger = logging.getLogger(__name__)


def extract_phonetic(payload: Any) -> str:
    """Pick the transcription out of a dictionary API response.

    Uses the first entry's ``phonetic`` field, else the first non-empty
    ``text`` among its ``phonetics`` variants, else "".

    Args:
        payload: Decoded JSON response (a list of entries)

    Returns:
        The transcription, possibly empty
    """
    if not isinstance(payload, list) or not payload or not isinstance(payload[0], dict):
        return ""

    first = payload[0]
    if first.get("phonetic"):
        return str(first["phonetic"])

    for variant in first.get("phonetics") or []:
        if isinstance(variant, dict) and variant.get("text"):
            return str(variant["text"])

    return ""


class PhoneticService:
    """Resolve IPA transcriptions for the lemma list, one request at a time.

    Lookups use the word text only; homographs with different parts of
    speech receive the same transcription.
    """

    def __init__(
        self,
        config: LemmaDecksConfig,
        repository: IpaRepository | None = None,
        sleep: Callable[[float], None] | None = None,
    ):
        """Initialize the phonetic service.

        Args:
            config: Configuration for the dictionary endpoint
            repository: IPA store (defaults to the file in the input folder)
            sleep: Delay function between requests (defaults to time.sleep)
        """
        self.config = config
        self.repository = repository or IpaRepository(
            JsonStore(FileStorage(config.input_dir)), config.ipas_filename
        )
        self._sleep = sleep or time.sleep

    def fetch_missing(
        self,
        entries: list[LemmaEntry],
        progress_callback: ProgressCallback | None = None,
    ) -> FetchResult:
        """Look up every lemma whose identity key is absent from the IPA map.

        The map is rewritten after every resolved word. Failed lookups
        store nothing, so the word is retried on the next run.

        Args:
            entries: Lemma entries in file order
            progress_callback: Optional callback for progress reporting

        Returns:
            FetchResult with resolved/failed counts
        """
        result = FetchResult(description="Phonetics", total=len(entries))
        pending = [entry for entry in entries if not self.repository.contains(entry.id)]
        result.skipped = len(entries) - len(pending)

        if progress_callback:
            progress_callback.on_start(len(pending), "Fetching phonetics")

        resolved_by_text: dict[str, str] = {}
        for i, entry in enumerate(pending, 1):
            if self.repository.contains(entry.id):
                result.skipped += 1
                continue

            text = entry.word.text
            if text in resolved_by_text:
                self.repository.set(entry.id, resolved_by_text[text])
                result.fetched += 1
                if progress_callback:
                    progress_callback.on_progress(i, f"{text} - reused {resolved_by_text[text]}")
                continue

            try:
                phonetic = self.lookup(text)
            except PhoneticLookupError as e:
                logger.warning(f"{text} - cannot find phonetic: {e}")
                result.failed += 1
                result.errors.append(f"{entry.id}: {e}")
                if progress_callback:
                    progress_callback.on_error(text, str(e))
            else:
                resolved_by_text[text] = phonetic
                self.repository.set(entry.id, phonetic)
                result.fetched += 1
                logger.info(f"{text} - found phonetic {phonetic!r}")
                if progress_callback:
                    progress_callback.on_progress(i, f"{text} - {phonetic}")

            if i < len(pending):
                self._sleep(self.config.dictionary_delay)

        if progress_callback:
            progress_callback.on_complete()

        return result

    def lookup(self, word: str) -> str:
        """Fetch the transcription of a single word.

        Args:
            word: Literal word text

        Returns:
            The transcription (empty when the entry has none)

        Raises:
            PhoneticLookupError: On network failure, non-200 status or bad JSON
        """
        url = f"{self.config.dictionary_api_url}/{quote(word)}"
        try:
            response = requests.get(url, timeout=self.config.dictionary_timeout)
        except requests.RequestException as e:
            raise PhoneticLookupError(f"request failed: {e}") from e

        if response.status_code != 200:
            raise PhoneticLookupError(f"status code {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise PhoneticLookupError(f"invalid JSON: {e}") from e

        return extract_phonetic(payload)
