"""Service for splitting cards into frequency-balanced deck files."""

import logging
from pathlib import Path

from lemma_decks.config import LemmaDecksConfig
from lemma_decks.models import Card, DeckSummary, LemmaEntry, Meaning
from lemma_decks.utils import ensure_directory

logger = logging.getLogger(__name__)


def build_cards(
    entries: list[LemmaEntry],
    meanings: dict[str, Meaning],
    ipas: dict[str, str],
) -> list[Card]:
    """Join lemma entries with meanings and transcriptions by identity key.

    Missing meanings or transcriptions become empty strings.

    Args:
        entries: Lemma entries in file order
        meanings: Meanings keyed by identity key
        ipas: Transcriptions keyed by identity key

    Returns:
        One card per lemma entry, in input order
    """
    return [
        Card.from_sources(entry, meanings.get(entry.id), ipas.get(entry.id)) for entry in entries
    ]


def partition(cards: list[Card], share: float) -> list[list[Card]]:
    """Split cards into decks of roughly ``share`` of the total frequency each.

    Cards are sorted by descending frequency and assigned greedily. A new
    deck starts when the next card would push the current one strictly
    above the threshold; a single card larger than the threshold still
    gets its own deck. Empty decks are never produced.

    Args:
        cards: Cards in any order
        share: Fraction of the total frequency allowed per deck

    Returns:
        Decks in creation order
    """
    ordered = sorted(cards, key=lambda card: card.amount, reverse=True)
    total = sum(card.amount for card in ordered)
    threshold = int(total * share)

    decks: list[list[Card]] = []
    current: list[Card] = []
    current_total = 0

    for card in ordered:
        if current and current_total + card.amount > threshold:
            decks.append(current)
            current = []
            current_total = 0
        current.append(card)
        current_total += card.amount

    if current:
        decks.append(current)

    return decks


def sound(filename: str) -> str:
    return f"[sound:{filename}]"


def format_card(card: Card) -> str:
    """Render a card as one tab-separated import line (without newline)."""
    return "\t".join(
        [
            card.id,
            card.text,
            card.meaning,
            card.example,
            f"<img src='{card.image}'>",
            sound(card.sound_word),
            sound(card.sound_meaning),
            sound(card.sound_example),
            card.part_of_speech_label,
            card.ipa,
            str(card.rank),
            str(card.amount),
        ]
    )


class DeckService:
    """Write frequency-balanced decks as tab-separated text files."""

    def __init__(self, config: LemmaDecksConfig):
        self.config = config

    def deck_path(self, index: int) -> Path:
        return self.config.output_dir / self.config.deck_filename_template.format(index=index)

    def build_decks(
        self,
        entries: list[LemmaEntry],
        meanings: dict[str, Meaning],
        ipas: dict[str, str],
    ) -> list[DeckSummary]:
        """Build cards, partition them and write one file per deck.

        Args:
            entries: Lemma entries in file order
            meanings: Meanings keyed by identity key
            ipas: Transcriptions keyed by identity key

        Returns:
            Summaries of the written decks, in deck order
        """
        cards = build_cards(entries, meanings, ipas)
        total = sum(card.amount for card in cards)
        ensure_directory(self.config.output_dir)

        summaries = []
        for index, deck in enumerate(partition(cards, self.config.deck_share), 1):
            summaries.append(self.write_deck(deck, index, total))
        return summaries

    def write_deck(self, deck: list[Card], index: int, total: int) -> DeckSummary:
        """Write one deck file.

        Args:
            deck: Non-empty list of cards
            index: 1-based deck number
            total: Total frequency of all cards (for the share figure)

        Returns:
            Summary of the written deck
        """
        path = self.deck_path(index)
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            for card in deck:
                f.write(format_card(card) + "\n")

        deck_total = sum(card.amount for card in deck)
        summary = DeckSummary(
            index=index,
            card_count=len(deck),
            total_amount=deck_total,
            share=deck_total / total * 100 if total else 0.0,
            path=path,
        )
        logger.info(f"Wrote {path}: {summary}")
        return summary
