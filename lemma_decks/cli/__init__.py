"""Command-line interface for Lemma Decks."""
