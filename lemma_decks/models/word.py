"""Data models for vocabulary words."""

from dataclasses import dataclass
from typing import Any


def word_id(text: str, part_of_speech: str) -> str:
    """Build the identity key that correlates a word across all stores.

    Args:
        text: Word text (e.g. "the")
        part_of_speech: Short part-of-speech code (e.g. "det")

    Returns:
        Identity key such as "the-det"
    """
    return f"{text}-{part_of_speech}"


@dataclass(frozen=True)
class Word:
    """A word together with its part-of-speech code."""

    text: str
    part_of_speech: str  # Short code, e.g. "n", "v", "det"

    @property
    def id(self) -> str:
        return word_id(self.text, self.part_of_speech)

    def __str__(self) -> str:
        return f"{self.text} {self.part_of_speech}"


@dataclass(frozen=True)
class LemmaEntry:
    """A line of the frequency lemma list."""

    rank: int  # Position in the frequency list
    amount: int  # Occurrence count in the corpus
    word: Word

    @property
    def id(self) -> str:
        return self.word.id


@dataclass(frozen=True)
class Meaning:
    """Definition and example sentence for a word.

    Serialized with the short keys the meanings store uses:
    ``w`` (word), ``p`` (part of speech), ``m`` (meaning), ``e`` (example).
    """

    word: Word
    meaning: str = ""
    example: str = ""

    @property
    def id(self) -> str:
        return self.word.id

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Meaning":
        """Build a Meaning from its stored form, tolerating missing keys."""
        return cls(
            word=Word(text=str(data.get("w", "")), part_of_speech=str(data.get("p", ""))),
            meaning=str(data.get("m", "")),
            example=str(data.get("e", "")),
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "w": self.word.text,
            "p": self.word.part_of_speech,
            "m": self.meaning,
            "e": self.example,
        }
