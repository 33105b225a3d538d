"""Null presenter for testing (no output)."""

from lemma_decks.models import DeckSummary, FetchResult


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        pass

    def show_success(self, message: str) -> None:
        pass

    def show_warning(self, message: str) -> None:
        pass

    def show_error(self, message: str) -> None:
        pass

    def show_deck_summary(self, summary: DeckSummary) -> None:
        pass

    def show_fetch_result(self, result: FetchResult) -> None:
        pass


class NullProgressCallback:
    """Null implementation of progress callback (testing)."""

    def on_start(self, total: int, description: str) -> None:
        pass

    def on_progress(self, current: int, item_description: str) -> None:
        pass

    def on_complete(self) -> None:
        pass

    def on_error(self, item_description: str, error_message: str) -> None:
        pass
