"""Service for parsing the frequency lemma list."""

import logging
from collections.abc import Iterable
from pathlib import Path

from lemma_decks.exceptions import LemmaParseError, SetupError
from lemma_decks.models import LemmaEntry, Word

logger = logging.getLogger(__name__)


class LemmaParserService:
    """Parse ``rank amount word posCode`` lines into lemma entries (stateless service).

    Entries are returned in file order; the parser does not re-sort.
    """

    def parse_file(self, path: Path) -> list[LemmaEntry]:
        """Parse a lemma list file.

        Args:
            path: Path to the lemma list

        Returns:
            Lemma entries in file order

        Raises:
            SetupError: If the file does not exist
            LemmaParseError: If any line is malformed or the file is not UTF-8
        """
        if not path.exists():
            raise SetupError(f"Lemma list not found at: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                entries = self.parse_lines(f)
        except UnicodeDecodeError as e:
            raise LemmaParseError(f"{path} is not valid UTF-8: {e}") from e

        logger.info(f"Loaded {len(entries)} lemma entries from {path}")
        return entries

    def parse_lines(self, lines: Iterable[str]) -> list[LemmaEntry]:
        """Parse an iterable of lemma lines, skipping blank ones.

        Args:
            lines: Iterable of text lines

        Returns:
            Lemma entries in input order
        """
        entries = []
        for line_no, line in enumerate(lines, 1):
            line = line.rstrip("\r\n")
            if not line.strip():
                continue
            entries.append(self.parse_line(line, line_no))
        return entries

    @staticmethod
    def parse_line(line: str, line_no: int = 0) -> LemmaEntry:
        """Parse a single lemma line.

        Args:
            line: Line such as "1 500 the det"
            line_no: Line number used in error messages

        Returns:
            The parsed LemmaEntry

        Raises:
            LemmaParseError: If the line has fewer than four fields or the
                rank/amount are not integers
        """
        fields = line.split(" ")
        if len(fields) < 4:
            raise LemmaParseError(
                f"Line {line_no}: expected 'rank amount word pos', got {line!r}"
            )

        rank_text, amount_text, text, part_of_speech = fields[:4]
        try:
            rank = int(rank_text)
            amount = int(amount_text)
        except ValueError as e:
            raise LemmaParseError(
                f"Line {line_no}: rank and amount must be integers: {line!r}"
            ) from e

        word = Word(text=text, part_of_speech=part_of_speech)
        return LemmaEntry(rank=rank, amount=amount, word=word)
