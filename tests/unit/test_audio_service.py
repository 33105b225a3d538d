"""Tests for AudioService."""

from unittest.mock import patch

import pytest
import requests

from lemma_decks.exceptions import AudioDownloadError
from lemma_decks.services.audio_service import AudioService


@pytest.fixture
def service(test_config):
    return AudioService(test_config)


class TestFetchAll:
    def test_creates_three_files(self, service, test_config, make_meaning, make_response):
        with patch("requests.get", return_value=make_response(content=b"ID3fake-mp3")) as mock_get:
            result = service.fetch_all([make_meaning("the", "det")])

        names = sorted(p.name for p in test_config.audio_dir.iterdir())
        assert names == ["the-det-example.mp3", "the-det-meaning.mp3", "the-det-word.mp3"]
        assert mock_get.call_count == 3
        assert result.fetched == 3
        assert (test_config.audio_dir / "the-det-word.mp3").read_bytes() == b"ID3fake-mp3"

    def test_rerun_makes_no_requests(self, service, make_meaning, make_response):
        meaning = make_meaning("the", "det")
        with patch("requests.get", return_value=make_response(content=b"ID3")):
            service.fetch_all([meaning])

        with patch("requests.get") as mock_get:
            result = service.fetch_all([meaning])

        mock_get.assert_not_called()
        assert result.skipped == 3

    def test_existing_empty_file_trusted(self, service, test_config, make_meaning, make_response):
        test_config.audio_dir.mkdir(parents=True)
        (test_config.audio_dir / "the-det-word.mp3").write_bytes(b"")

        with patch("requests.get", return_value=make_response(content=b"ID3")) as mock_get:
            service.fetch_all([make_meaning("the", "det")])

        assert mock_get.call_count == 2

    def test_field_texts_sent(self, service, make_meaning, make_response, test_config):
        meaning = make_meaning("cat", "n", meaning="a small animal", example="The cat sleeps.")
        with patch("requests.get", return_value=make_response(content=b"ID3")) as mock_get:
            service.fetch_all([meaning])

        sent = [c.kwargs["params"]["q"] for c in mock_get.call_args_list]
        assert sent == ["cat", "a small animal", "The cat sleeps."]
        params = mock_get.call_args.kwargs["params"]
        assert params["tl"] == test_config.tts_language
        assert params["client"] == "tw-ob"

    def test_network_error_aborts(self, service, make_meaning):
        meanings = [make_meaning("the", "det"), make_meaning("cat", "n")]
        with (
            patch("requests.get", side_effect=requests.exceptions.ConnectionError()) as mock_get,
            pytest.raises(AudioDownloadError),
        ):
            service.fetch_all(meanings)

        assert mock_get.call_count == 1

    def test_error_status_aborts_without_file(self, service, test_config, make_meaning, make_response):
        with (
            patch("requests.get", return_value=make_response(status_code=500)),
            pytest.raises(AudioDownloadError, match="500"),
        ):
            service.fetch_all([make_meaning("the", "det")])

        assert list(test_config.audio_dir.iterdir()) == []

    def test_broken_stream_removes_partial_file(self, service, test_config, make_meaning, make_response):
        resp = make_response()

        def _chunks(chunk_size=None):
            yield b"ID3partial"
            raise requests.exceptions.ChunkedEncodingError("cut")

        resp.iter_content.side_effect = _chunks

        with patch("requests.get", return_value=resp), pytest.raises(AudioDownloadError):
            service.fetch_all([make_meaning("the", "det")])

        assert not (test_config.audio_dir / "the-det-word.mp3").exists()

    def test_empty_text_skipped(self, service, make_meaning, make_response):
        with patch("requests.get", return_value=make_response(content=b"ID3")) as mock_get:
            result = service.fetch_all([make_meaning("the", "det", example="")])

        assert mock_get.call_count == 2
        assert result.skipped == 1
