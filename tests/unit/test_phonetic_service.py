"""Tests for PhoneticService."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from lemma_decks.exceptions import PhoneticLookupError
from lemma_decks.services.json_store import JsonStore, MemoryStorage
from lemma_decks.services.phonetic_service import PhoneticService, extract_phonetic
from lemma_decks.services.repositories import IpaRepository


@pytest.fixture
def backend():
    return MemoryStorage()


@pytest.fixture
def repository(backend):
    return IpaRepository(JsonStore(backend), "ipas.json")


@pytest.fixture
def sleep():
    return MagicMock()


@pytest.fixture
def service(test_config, repository, sleep):
    return PhoneticService(test_config, repository, sleep=sleep)


class TestExtractPhonetic:
    def test_top_level_phonetic(self):
        assert extract_phonetic([{"phonetic": "/ðə/", "phonetics": [{"text": "/ði/"}]}]) == "/ðə/"

    def test_first_non_empty_variant(self):
        payload = [{"phonetics": [{"audio": "x.mp3"}, {"text": ""}, {"text": "/kæt/"}]}]
        assert extract_phonetic(payload) == "/kæt/"

    def test_nothing_found(self):
        assert extract_phonetic([{"phonetics": []}]) == ""

    def test_only_first_entry_used(self):
        assert extract_phonetic([{}, {"phonetic": "/x/"}]) == ""

    def test_unexpected_shape(self):
        assert extract_phonetic({"title": "No Definitions Found"}) == ""
        assert extract_phonetic([]) == ""


class TestLookup:
    def test_requests_word_in_path(self, service, make_response, test_config):
        with patch("requests.get", return_value=make_response(json_data=[{"phonetic": "/ðə/"}])) as mock_get:
            assert service.lookup("the") == "/ðə/"

        assert mock_get.call_args.args[0] == f"{test_config.dictionary_api_url}/the"

    def test_non_200_raises(self, service, make_response):
        with (
            patch("requests.get", return_value=make_response(status_code=404)),
            pytest.raises(PhoneticLookupError, match="404"),
        ):
            service.lookup("qwxz")

    def test_network_error_raises(self, service):
        with (
            patch("requests.get", side_effect=requests.exceptions.ConnectionError()),
            pytest.raises(PhoneticLookupError),
        ):
            service.lookup("the")


class TestFetchMissing:
    def test_known_key_never_requested(self, service, repository, make_entry):
        repository.set("the-det", "/ðə/")

        with patch("requests.get") as mock_get:
            result = service.fetch_missing([make_entry("the", "det")])

        mock_get.assert_not_called()
        assert result.skipped == 1

    def test_stores_and_writes_after_each_word(self, service, backend, repository, make_entry, make_response):
        responses = [
            make_response(json_data=[{"phonetic": "/ðə/"}]),
            make_response(json_data=[{"phonetics": [{"text": "/kæt/"}]}]),
        ]
        with patch("requests.get", side_effect=responses):
            result = service.fetch_missing([make_entry("the", "det"), make_entry("cat", "n")])

        assert result.fetched == 2
        assert backend.writes == 2
        assert repository.load() == {"the-det": "/ðə/", "cat-n": "/kæt/"}

    def test_failure_stores_nothing(self, service, repository, make_entry, make_response, recording_progress):
        with patch("requests.get", return_value=make_response(status_code=404)):
            result = service.fetch_missing([make_entry("qwxz", "n")], recording_progress)

        assert result.failed == 1
        assert not repository.contains("qwxz-n")
        assert recording_progress.errors[0][0] == "qwxz"

    def test_same_text_reused_across_parts_of_speech(self, service, repository, make_entry, make_response):
        with patch("requests.get", return_value=make_response(json_data=[{"phonetic": "/rʌn/"}])) as mock_get:
            service.fetch_missing([make_entry("run", "v"), make_entry("run", "n")])

        assert mock_get.call_count == 1
        assert repository.load() == {"run-v": "/rʌn/", "run-n": "/rʌn/"}

    def test_sleeps_between_requests(self, service, sleep, make_entry, make_response, test_config):
        with patch("requests.get", return_value=make_response(json_data=[{"phonetic": "/x/"}])):
            service.fetch_missing([make_entry("a", "det"), make_entry("b", "n"), make_entry("c", "n")])

        assert sleep.call_count == 2
        sleep.assert_called_with(test_config.dictionary_delay)

    def test_duplicate_lemma_lines_looked_up_once(self, service, make_entry, make_response):
        with patch("requests.get", return_value=make_response(json_data=[{"phonetic": "/ðə/"}])) as mock_get:
            result = service.fetch_missing([make_entry("the", "det"), make_entry("the", "det")])

        assert mock_get.call_count == 1
        assert result.fetched == 1
        assert result.skipped == 1
