"""Data model for an exported flashcard."""

from dataclasses import dataclass

from .word import LemmaEntry, Meaning

PARTS_OF_SPEECH = {
    "n": "noun",
    "v": "verb",
    "a": "adjective",
    "adv": "adverb",
    "conj": "conjunction",
    "interjection": "interjection",
    "pron": "pronoun",
    "prep": "preposition",
    "modal": "modal verb",
    "co": "coordinating conjunction",
    "det": "determiner",
    "infinitive-marker": "infinitive marker",
}


def part_of_speech_label(code: str) -> str:
    """Return the human-readable label for a part-of-speech code.

    Unknown codes are returned unchanged.
    """
    return PARTS_OF_SPEECH.get(code, code)


@dataclass
class Card:
    """A lemma joined with its meaning, phonetics and media filenames.

    Built transiently when decks are written; never persisted.
    """

    entry: LemmaEntry
    meaning: str = ""
    example: str = ""
    ipa: str = ""

    @classmethod
    def from_sources(
        cls,
        entry: LemmaEntry,
        meaning: Meaning | None = None,
        ipa: str | None = None,
    ) -> "Card":
        """Join a lemma entry with its (possibly missing) meaning and IPA."""
        return cls(
            entry=entry,
            meaning=meaning.meaning if meaning else "",
            example=meaning.example if meaning else "",
            ipa=ipa or "",
        )

    @property
    def id(self) -> str:
        return self.entry.id

    @property
    def text(self) -> str:
        return self.entry.word.text

    @property
    def rank(self) -> int:
        return self.entry.rank

    @property
    def amount(self) -> int:
        return self.entry.amount

    @property
    def part_of_speech_label(self) -> str:
        return part_of_speech_label(self.entry.word.part_of_speech)

    @property
    def image(self) -> str:
        return f"{self.id}.jpg"

    @property
    def sound_word(self) -> str:
        return f"{self.id}-word.mp3"

    @property
    def sound_meaning(self) -> str:
        return f"{self.id}-meaning.mp3"

    @property
    def sound_example(self) -> str:
        return f"{self.id}-example.mp3"

    def __str__(self) -> str:
        return f"{self.id} (rank {self.rank}, {self.amount})"
