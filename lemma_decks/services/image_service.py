"""Service for generating illustrations from example sentences."""

import logging
from enum import Enum
from pathlib import Path
from urllib.parse import quote_plus

import requests

from lemma_decks.config import LemmaDecksConfig
from lemma_decks.interfaces import ProgressCallback
from lemma_decks.models import FetchResult, Meaning
from lemma_decks.utils import (
    RetryPolicy,
    ensure_directory,
    remove_quietly,
    run_bounded,
    stream_to_file,
)

logger = logging.getLogger(__name__)


class ImageOutcome(Enum):
    """How a single image download ended."""

    DOWNLOADED = "downloaded"
    REJECTED = "rejected"  # Non-200 answer; not retried this run
    FAILED = "failed"  # Every attempt raised


class ImageService:
    """Download one image per meaning on a bounded thread pool.

    Requests alternate round-robin between a direct connection and the
    configured proxies. Per-item failures are logged and skipped; they
    never abort the run.
    """

    def __init__(self, config: LemmaDecksConfig, retry_policy: RetryPolicy | None = None):
        """Initialize the image service.

        Args:
            config: Configuration for the image endpoint, proxies and workers
            retry_policy: Retry policy for failed requests (built from config if omitted)
        """
        self.config = config
        self.retry_policy = retry_policy or RetryPolicy(
            max_attempts=config.image_max_attempts,
            base_delay=config.image_backoff_base,
            max_delay=config.image_backoff_max,
            retry_on=(requests.RequestException,),
        )
        self.routes: list[str | None] = [None, *config.proxies]

    def image_path(self, meaning: Meaning) -> Path:
        return self.config.image_dir / f"{meaning.id}.jpg"

    def image_url(self, meaning: Meaning) -> str:
        return f"{self.config.image_api_url}/{quote_plus(meaning.example)}"

    def route_for(self, index: int) -> str | None:
        """Proxy URL for the item at ``index`` (None means direct)."""
        return self.routes[index % len(self.routes)]

    def missing(self, meanings: list[Meaning]) -> list[Meaning]:
        return [meaning for meaning in meanings if not self.image_path(meaning).exists()]

    def fetch_missing(
        self,
        meanings: list[Meaning],
        progress_callback: ProgressCallback | None = None,
    ) -> FetchResult:
        """Download images for meanings that have no image file yet.

        Args:
            meanings: Meanings from the store
            progress_callback: Optional callback for progress reporting

        Returns:
            FetchResult with downloaded/rejected/failed counts
        """
        ensure_directory(self.config.image_dir)
        pending = self.missing(meanings)
        result = FetchResult(
            description="Images",
            total=len(meanings),
            skipped=len(meanings) - len(pending),
        )

        if progress_callback:
            progress_callback.on_start(len(pending), "Fetching images")

        completed = 0

        def on_done(index: int, meaning: Meaning, outcome: ImageOutcome | None, error):
            nonlocal completed
            completed += 1
            if error is not None:
                outcome = ImageOutcome.FAILED
                logger.error(f"{meaning.id}: unexpected error: {error}")
                result.errors.append(f"{meaning.id}: {error}")

            if outcome is ImageOutcome.DOWNLOADED:
                result.fetched += 1
                if progress_callback:
                    progress_callback.on_progress(completed, f"{meaning.id} {meaning.example}")
            elif outcome is ImageOutcome.REJECTED:
                result.skipped += 1
                if progress_callback:
                    progress_callback.on_progress(completed, f"{meaning.id} rejected")
            else:
                result.failed += 1
                if progress_callback:
                    progress_callback.on_error(meaning.id, "image download failed")

        run_bounded(pending, self.download, self.config.image_workers, on_done=on_done)

        if progress_callback:
            progress_callback.on_complete()

        return result

    def download(self, index: int, meaning: Meaning) -> ImageOutcome:
        """Generate and save the image for one meaning.

        Args:
            index: Position of the item in the work list (selects the route)
            meaning: Meaning whose example sentence is the prompt

        Returns:
            The outcome of the download
        """
        output_path = self.image_path(meaning)
        url = self.image_url(meaning)
        proxy = self.route_for(index)
        proxies = {"http": proxy, "https": proxy} if proxy else None

        def request() -> requests.Response:
            return requests.get(
                url,
                proxies=proxies,
                stream=True,
                timeout=self.config.image_timeout,
            )

        try:
            response = self.retry_policy.call(request, description=meaning.id)
        except requests.RequestException as e:
            logger.warning(
                f"{meaning.id}: giving up after {self.retry_policy.max_attempts} attempts: {e}"
            )
            return ImageOutcome.FAILED

        try:
            if response.status_code != 200:
                # Treated as done for this run; only the filesystem is checked next time
                logger.warning(
                    f"{meaning.id}: image API returned {response.status_code}: {response.text}"
                )
                return ImageOutcome.REJECTED

            try:
                stream_to_file(response.iter_content(chunk_size=8192), output_path)
            except (requests.RequestException, OSError) as e:
                remove_quietly(output_path)
                logger.warning(f"{meaning.id}: cannot save image: {e}")
                return ImageOutcome.FAILED
        finally:
            response.close()

        logger.info(f"|{index}| {meaning.id} {meaning.example}")
        return ImageOutcome.DOWNLOADED
