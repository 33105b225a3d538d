"""Main CLI entry point for lemma_decks."""

import argparse
import logging
import sys
from pathlib import Path

from lemma_decks import __version__
from lemma_decks.cli.commands import operations
from lemma_decks.config import create_config_from_env
from lemma_decks.exceptions import LemmaDecksException
from lemma_decks.presenters import ConsolePresenter, ConsoleProgressCallback

# Switch name -> command, in execution order
OPERATIONS = (
    ("txt", operations.build_decks_command),
    ("audio", operations.fetch_audio_command),
    ("meanings", operations.fetch_meanings_command),
    ("img", operations.fetch_images_command),
    ("ipas", operations.fetch_phonetics_command),
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lemma-decks",
        description="Build frequency-balanced Anki decks from a lemma list",
        epilog="Several operation switches may be combined; they run in the order listed",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    ops = parser.add_argument_group("operations")
    ops.add_argument("-txt", "--txt", action="store_true", help="Write deck text files")
    ops.add_argument("-audio", "--audio", action="store_true", help="Fetch TTS audio for meanings")
    ops.add_argument(
        "-meanings", "--meanings", action="store_true", help="Generate meanings with the LLM"
    )
    ops.add_argument("-img", "--img", action="store_true", help="Generate images from examples")
    ops.add_argument("-ipas", "--ipas", action="store_true", help="Fetch phonetic transcriptions")

    parser.add_argument(
        "--workdir",
        type=Path,
        default=Path("."),
        help="Directory containing input/ and output/ (default: current directory)",
    )
    parser.add_argument(
        "--env-file", type=Path, default=Path(".env"), help="Dotfile with the API token"
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Also write logs to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def configure_logging(verbose: bool, log_file: Path | None) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
    )
    # Raw responses are logged at DEBUG; keep them in the file only
    if log_file is not None and not verbose:
        logging.getLogger("lemma_decks").setLevel(logging.INFO)
        handlers[0].setLevel(logging.WARNING)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    selected = [(name, command) for name, command in OPERATIONS if getattr(args, name)]
    if not selected:
        parser.print_help()
        return 1

    configure_logging(args.verbose, args.log_file)

    config = create_config_from_env(
        env_file=args.workdir / args.env_file,
        input_dir=args.workdir / "input",
        output_dir=args.workdir / "output",
    )
    presenter = ConsolePresenter()
    progress = ConsoleProgressCallback()

    exit_code = 0
    for name, command in selected:
        try:
            exit_code = command(config, presenter, progress) or exit_code
        except LemmaDecksException as e:
            presenter.show_error(f"{name}: {e}")
            return 1

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
