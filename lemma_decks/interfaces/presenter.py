"""Presenter protocol for output abstraction."""

from typing import Protocol

from lemma_decks.models import DeckSummary, FetchResult


class PresenterProtocol(Protocol):
    """Interface for presenting output to the user.

    Commands talk to the presenter only, so the same services can run
    under the console or silently under tests.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_success(self, message: str) -> None:
        """Display a success message.

        Args:
            message: The success message to display
        """
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message.

        Args:
            message: The warning message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_deck_summary(self, summary: DeckSummary) -> None:
        """Display the summary line for one written deck.

        Args:
            summary: The deck that was written
        """
        ...

    def show_fetch_result(self, result: FetchResult) -> None:
        """Display the counters of a finished fetch operation.

        Args:
            result: The fetch result to display
        """
        ...
