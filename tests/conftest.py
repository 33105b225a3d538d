"""Pytest configuration and shared fixtures."""

import json
from unittest.mock import MagicMock

import pytest

from lemma_decks.config import LemmaDecksConfig
from lemma_decks.models import LemmaEntry, Meaning, Word
from lemma_decks.presenters import NullPresenter, NullProgressCallback


@pytest.fixture
def temp_dir(tmp_path):
    """Provide a temporary directory for test files."""
    return tmp_path


@pytest.fixture
def test_config(temp_dir):
    """Provide a test configuration with temporary paths and no delays."""
    return LemmaDecksConfig(
        input_dir=temp_dir / "input",
        output_dir=temp_dir / "output",
        llm_api_token="test-token",
        meanings_batch_size=2,
        image_workers=2,  # Reduced for tests
        image_max_attempts=3,
        image_backoff_base=0.0,
        proxies=(),
        dictionary_delay=0.0,
    )


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


@pytest.fixture
def null_progress():
    """Provide a null progress callback for testing."""
    return NullProgressCallback()


@pytest.fixture
def make_entry():
    """Factory fixture for creating LemmaEntry instances."""

    def _make(text="the", part_of_speech="det", rank=1, amount=500):
        return LemmaEntry(rank=rank, amount=amount, word=Word(text, part_of_speech))

    return _make


@pytest.fixture
def make_meaning():
    """Factory fixture for creating Meaning instances with sensible defaults."""

    def _make(
        text="the",
        part_of_speech="det",
        meaning="Denoting things already mentioned",
        example="What's the matter?",
    ):
        return Meaning(word=Word(text, part_of_speech), meaning=meaning, example=example)

    return _make


@pytest.fixture
def write_lemma(test_config):
    """Write lemma lines to the configured lemma file."""

    def _write(*lines):
        test_config.input_dir.mkdir(parents=True, exist_ok=True)
        test_config.lemma_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return test_config.lemma_path

    return _write


@pytest.fixture
def write_meanings(test_config):
    """Write meanings (as Meaning objects) to the configured meanings store."""

    def _write(*meanings):
        test_config.input_dir.mkdir(parents=True, exist_ok=True)
        path = test_config.input_dir / test_config.meanings_filename
        path.write_text(json.dumps([m.to_dict() for m in meanings]), encoding="utf-8")
        return path

    return _write


def _mock_response(status_code=200, content=b"", json_data=None, text=""):
    """Create a mock requests.Response."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.content = content
    resp.text = text
    resp.iter_content.return_value = [content]
    if json_data is None:
        resp.json.side_effect = ValueError("No JSON")
    else:
        resp.json.return_value = json_data
    return resp


@pytest.fixture
def make_response():
    """Factory fixture for mock requests.Response objects."""
    return _mock_response


class RecordingProgress:
    """A real ProgressCallback implementation that records all calls for assertion."""

    def __init__(self):
        self.starts = []
        self.progresses = []
        self.completes = 0
        self.errors = []

    def on_start(self, total: int, description: str) -> None:
        self.starts.append((total, description))

    def on_progress(self, current: int, item_description: str) -> None:
        self.progresses.append((current, item_description))

    def on_complete(self) -> None:
        self.completes += 1

    def on_error(self, item_description: str, error_message: str) -> None:
        self.errors.append((item_description, error_message))


@pytest.fixture
def recording_progress():
    """Provide a progress callback that records all calls for assertion."""
    return RecordingProgress()
