"""Service for downloading text-to-speech audio for stored meanings."""

import logging
from pathlib import Path

import requests

from lemma_decks.config import LemmaDecksConfig
from lemma_decks.exceptions import AudioDownloadError
from lemma_decks.interfaces import ProgressCallback
from lemma_decks.models import FetchResult, Meaning
from lemma_decks.utils import ensure_directory, remove_quietly, stream_to_file

logger = logging.getLogger(__name__)

AUDIO_FIELDS = ("word", "meaning", "example")


def audio_texts(meaning: Meaning) -> dict[str, str]:
    """Map each audio field name to the text it is spoken from."""
    return {
        "word": meaning.word.text,
        "meaning": meaning.meaning,
        "example": meaning.example,
    }


class AudioService:
    """Download one MP3 per meaning and field, skipping files already on disk.

    Existing files are trusted as complete. Any download error aborts
    the run.
    """

    def __init__(self, config: LemmaDecksConfig):
        """Initialize the audio service.

        Args:
            config: Configuration for the TTS endpoint and output folder
        """
        self.config = config

    def audio_path(self, meaning: Meaning, field_name: str) -> Path:
        return self.config.audio_dir / f"{meaning.id}-{field_name}.mp3"

    def fetch_all(
        self,
        meanings: list[Meaning],
        progress_callback: ProgressCallback | None = None,
    ) -> FetchResult:
        """Download missing word/meaning/example audio for every meaning.

        Args:
            meanings: Meanings from the store
            progress_callback: Optional callback for progress reporting

        Returns:
            FetchResult counting downloaded and skipped files

        Raises:
            AudioDownloadError: On the first failed download
        """
        ensure_directory(self.config.audio_dir)
        result = FetchResult(description="Audio", total=len(meanings) * len(AUDIO_FIELDS))

        if progress_callback:
            progress_callback.on_start(len(meanings), "Fetching audio")

        for i, meaning in enumerate(meanings, 1):
            texts = audio_texts(meaning)
            for field_name in AUDIO_FIELDS:
                text = texts[field_name]
                if not text.strip():
                    logger.warning(f"{meaning.id}: empty {field_name} text, no audio requested")
                    result.skipped += 1
                    continue

                if self.download_if_missing(self.audio_path(meaning, field_name), text):
                    result.fetched += 1
                    logger.info(f"{i} {meaning.id}-{field_name} {text}")
                else:
                    result.skipped += 1

            if progress_callback:
                progress_callback.on_progress(i, meaning.id)

        if progress_callback:
            progress_callback.on_complete()

        return result

    def download_if_missing(self, output_path: Path, text: str) -> bool:
        """Synthesize ``text`` into ``output_path`` unless the file exists.

        Args:
            output_path: Destination MP3 file
            text: Literal text to speak

        Returns:
            True if a file was downloaded, False if it already existed

        Raises:
            AudioDownloadError: If the request, the status or the write fails
        """
        if output_path.exists():
            return False

        params = {
            "ie": "UTF-8",
            "total": "1",
            "idx": "0",
            "textlen": str(len(text)),
            "client": "tw-ob",
            "q": text,
            "tl": self.config.tts_language,
        }

        try:
            response = requests.get(
                self.config.tts_api_url,
                params=params,
                stream=True,
                timeout=self.config.tts_timeout,
            )
        except requests.RequestException as e:
            raise AudioDownloadError(f"TTS request failed for {output_path.name}: {e}") from e

        try:
            if response.status_code != 200:
                raise AudioDownloadError(
                    f"TTS returned {response.status_code} for {output_path.name}"
                )
            stream_to_file(response.iter_content(chunk_size=8192), output_path)
        except (requests.RequestException, OSError) as e:
            remove_quietly(output_path)
            raise AudioDownloadError(f"Cannot save {output_path.name}: {e}") from e
        finally:
            response.close()

        return True
