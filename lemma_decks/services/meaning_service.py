"""Service for generating word meanings and examples with a chat-completion API."""

import json
import logging

import requests

from lemma_decks.config import LemmaDecksConfig
from lemma_decks.exceptions import MeaningFetchError, SetupError
from lemma_decks.interfaces import ProgressCallback
from lemma_decks.models import FetchResult, LemmaEntry, Meaning, Word
from lemma_decks.utils import strip_code_fence

from .json_store import FileStorage, JsonStore
from .repositories import MeaningRepository

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    'I have words in format "the det". where the - word, det - part of speech. '
    "You should write meaning and example of this word considering part of speech. "
    'For example [{"w": "the", "m": "Denoting one or more people or things already '
    'mentioned or assumed to be common knowledge", "e": "What\'s the matter?", "p": "det"}]. '
    "All words please, delete whitespaces. Output should be in json format. "
    "Do not include any other text. I need it for further parsing"
)


def pending_words(entries: list[LemmaEntry], known_keys: set[str]) -> list[Word]:
    """Words from the lemma list that have no stored meaning yet.

    Args:
        entries: Lemma entries in file order
        known_keys: Identity keys already in the meanings store

    Returns:
        Unique words in first-seen order
    """
    words: list[Word] = []
    seen = set(known_keys)
    for entry in entries:
        if entry.id in seen:
            continue
        seen.add(entry.id)
        words.append(entry.word)
    return words


def build_user_message(words: list[Word]) -> str:
    """One "word pos" pair per line, as the system prompt describes."""
    return "".join(f"{word.text} {word.part_of_speech}\n" for word in words)


def parse_content(content: str) -> list[Meaning]:
    """Decode the model's answer into meanings.

    Args:
        content: Message content, possibly wrapped in a code fence

    Returns:
        Decoded meanings (no item-count validation)

    Raises:
        MeaningFetchError: If the answer is not a JSON array of objects
    """
    answer = strip_code_fence(content)
    try:
        data = json.loads(answer)
    except ValueError as e:
        raise MeaningFetchError(f"Model answer is not valid JSON: {e}") from e

    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise MeaningFetchError("Model answer is not a JSON array of objects")

    return [Meaning.from_dict(item) for item in data]


class MeaningService:
    """Fill the meanings store for every word of the lemma list.

    Any HTTP, JSON or empty-answer failure aborts the run; meanings from
    batches that finished earlier stay in the store.
    """

    def __init__(self, config: LemmaDecksConfig, repository: MeaningRepository | None = None):
        """Initialize the meaning service.

        Args:
            config: Configuration for the chat-completion endpoint
            repository: Meanings store (defaults to the file in the input folder)
        """
        self.config = config
        self.repository = repository or MeaningRepository(
            JsonStore(FileStorage(config.input_dir)), config.meanings_filename
        )

    def fetch_missing(
        self,
        entries: list[LemmaEntry],
        progress_callback: ProgressCallback | None = None,
    ) -> FetchResult:
        """Request meanings for all words absent from the store.

        Args:
            entries: Lemma entries in file order
            progress_callback: Optional callback for progress reporting

        Returns:
            FetchResult counting stored meanings

        Raises:
            SetupError: If no API token is configured and work remains
            MeaningFetchError: If any batch fails
        """
        words = pending_words(entries, self.repository.keys())
        result = FetchResult(description="Meanings", total=len(words))
        if not words:
            return result

        if not self.config.llm_api_token:
            raise SetupError("No chat-completion API token configured (OPENROUTER_API_TOKEN)")

        batch_size = max(1, self.config.meanings_batch_size)
        batches = [words[i : i + batch_size] for i in range(0, len(words), batch_size)]

        if progress_callback:
            progress_callback.on_start(len(batches), "Fetching meanings")

        for i, batch in enumerate(batches, 1):
            logger.info(
                f"Batch {i}/{len(batches)}: {len(batch)} words ({batch[0]} .. {batch[-1]})"
            )
            meanings = self.request_meanings(batch)
            added = self.repository.merge(meanings)
            result.fetched += added
            result.skipped += len(meanings) - added

            if progress_callback:
                progress_callback.on_progress(i, f"{added} meanings stored")

        if progress_callback:
            progress_callback.on_complete()

        return result

    def request_meanings(self, words: list[Word]) -> list[Meaning]:
        """Ask the chat-completion endpoint for the meanings of one batch.

        Args:
            words: Batch of words

        Returns:
            Meanings decoded from the first choice

        Raises:
            MeaningFetchError: On HTTP failure, undecodable payload or no choices
        """
        payload = {
            "model": self.config.llm_model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_user_message(words)},
            ],
        }
        headers = {
            "Authorization": f"Bearer {self.config.llm_api_token}",
            "Content-Type": "application/json",
        }

        try:
            response = requests.post(
                self.config.llm_api_url,
                json=payload,
                headers=headers,
                timeout=self.config.llm_timeout,
            )
        except requests.RequestException as e:
            raise MeaningFetchError(f"Chat-completion request failed: {e}") from e

        logger.info(f"Chat-completion status: {response.status_code}")
        logger.debug(f"Raw response ({len(response.content)} bytes): {response.text}")

        if response.status_code != 200:
            raise MeaningFetchError(
                f"Chat-completion returned {response.status_code}: {response.text[:200]}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise MeaningFetchError(f"Chat-completion response is not JSON: {e}") from e

        choices = data.get("choices") if isinstance(data, dict) else None
        if not choices:
            raise MeaningFetchError(f"Chat-completion returned no choices: {str(data)[:200]}")

        try:
            content = choices[0]["message"]["content"]
        except (KeyError, TypeError, IndexError) as e:
            raise MeaningFetchError("Chat-completion choice has no message content") from e

        return parse_content(content or "")
