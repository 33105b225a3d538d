"""Console presenter for CLI output."""

from lemma_decks.models import DeckSummary, FetchResult


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        print(f"[OK] {message}")

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_deck_summary(self, summary: DeckSummary) -> None:
        """Display the summary line for one written deck."""
        print(
            f"Created deck {summary.index}: {summary.card_count} cards, "
            f"total frequency: {summary.total_amount} ({summary.share:.1f}% of total)"
        )

    def show_fetch_result(self, result: FetchResult) -> None:
        """Display the counters of a finished fetch operation."""
        print(f"\n{result.description} complete:")
        print(f"  Items considered: {result.total}")
        print(f"  Fetched: {result.fetched}")
        print(f"  Skipped: {result.skipped}")
        print(f"  Failed: {result.failed}")

        if result.errors:
            print("\nErrors:")
            for error in result.errors[:20]:
                print(f"  {error}")
            if len(result.errors) > 20:
                print(f"  ... and {len(result.errors) - 20} more")


class ConsoleProgressCallback:
    """Console implementation of progress callback."""

    def __init__(self):
        """Initialize the progress callback."""
        self.total = 0
        self.current = 0
        self.description = ""

    def on_start(self, total: int, description: str) -> None:
        """Called when an operation starts."""
        self.total = total
        self.current = 0
        self.description = description
        print(f"\n{description}...")

    def on_progress(self, current: int, item_description: str) -> None:
        """Called when an item is processed."""
        self.current = current
        print(f"  [{current}/{self.total}] {item_description}")

    def on_complete(self) -> None:
        """Called when an operation completes."""
        print(f"  [OK] Complete: {self.current}/{self.total}")

    def on_error(self, item_description: str, error_message: str) -> None:
        """Called when an item fails."""
        print(f"  [ERROR] {item_description}: {error_message}")
