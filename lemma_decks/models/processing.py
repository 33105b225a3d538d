"""Data models for operation results."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class FetchResult:
    """Counters for one run of a fetch operation."""

    description: str
    total: int = 0  # Items considered
    fetched: int = 0  # Items downloaded or resolved this run
    skipped: int = 0  # Items already present, or rejected by the remote side
    failed: int = 0  # Items that errored and will be retried next run
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Check if every item was either fetched or skipped."""
        return self.failed == 0

    def __str__(self) -> str:
        return (
            f"FetchResult({self.description}: total={self.total}, "
            f"fetched={self.fetched}, skipped={self.skipped}, failed={self.failed})"
        )


@dataclass
class DeckSummary:
    """Summary of one written deck file."""

    index: int  # 1-based deck number
    card_count: int
    total_amount: int  # Summed frequency of the deck's cards
    share: float  # total_amount as a percentage of the whole corpus
    path: Path | None = None

    def __str__(self) -> str:
        return (
            f"Deck {self.index}: {self.card_count} cards, "
            f"total frequency {self.total_amount} ({self.share:.1f}% of total)"
        )
