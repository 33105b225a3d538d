"""Tests for text utilities."""

from lemma_decks.utils import strip_code_fence


class TestStripCodeFence:
    def test_plain_content_unchanged(self):
        assert strip_code_fence('[{"w": "a"}]') == '[{"w": "a"}]'

    def test_fence_with_json_tag(self):
        assert strip_code_fence('```json\n[1]\n```') == "[1]"

    def test_fence_without_tag(self):
        assert strip_code_fence("```\n[1]\n```") == "[1]"

    def test_surrounding_whitespace(self):
        assert strip_code_fence("  ```json [1]```  \n") == "[1]"
