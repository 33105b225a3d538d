"""CLI commands, one per operation switch."""

from lemma_decks.config import LemmaDecksConfig
from lemma_decks.interfaces import PresenterProtocol, ProgressCallback
from lemma_decks.services import (
    AudioService,
    DeckService,
    FileStorage,
    ImageService,
    IpaRepository,
    JsonStore,
    LemmaParserService,
    MeaningRepository,
    MeaningService,
    PhoneticService,
)


def _repositories(config: LemmaDecksConfig) -> tuple[MeaningRepository, IpaRepository]:
    store = JsonStore(FileStorage(config.input_dir))
    return (
        MeaningRepository(store, config.meanings_filename),
        IpaRepository(store, config.ipas_filename),
    )


def build_decks_command(
    config: LemmaDecksConfig,
    presenter: PresenterProtocol,
    progress: ProgressCallback,
) -> int:
    """Write the frequency-balanced deck files.

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    entries = LemmaParserService().parse_file(config.lemma_path)
    meanings, ipas = _repositories(config)

    summaries = DeckService(config).build_decks(entries, meanings.by_id(), ipas.load())
    for summary in summaries:
        presenter.show_deck_summary(summary)

    if not summaries:
        presenter.show_warning("Lemma list is empty, no decks written")
        return 1
    presenter.show_success(f"{len(summaries)} decks written to {config.output_dir}")
    return 0


def fetch_meanings_command(
    config: LemmaDecksConfig,
    presenter: PresenterProtocol,
    progress: ProgressCallback,
) -> int:
    """Fill the meanings store for words that have none yet."""
    entries = LemmaParserService().parse_file(config.lemma_path)
    meanings, _ = _repositories(config)

    result = MeaningService(config, meanings).fetch_missing(entries, progress)
    presenter.show_fetch_result(result)
    return 0


def fetch_audio_command(
    config: LemmaDecksConfig,
    presenter: PresenterProtocol,
    progress: ProgressCallback,
) -> int:
    """Download missing audio for every stored meaning."""
    meanings, _ = _repositories(config)

    result = AudioService(config).fetch_all(meanings.load(), progress)
    presenter.show_fetch_result(result)
    return 0


def fetch_images_command(
    config: LemmaDecksConfig,
    presenter: PresenterProtocol,
    progress: ProgressCallback,
) -> int:
    """Download missing images for every stored meaning."""
    meanings, _ = _repositories(config)

    result = ImageService(config).fetch_missing(meanings.load(), progress)
    presenter.show_fetch_result(result)
    return 0


def fetch_phonetics_command(
    config: LemmaDecksConfig,
    presenter: PresenterProtocol,
    progress: ProgressCallback,
) -> int:
    """Look up transcriptions for lemmas missing from the IPA map."""
    entries = LemmaParserService().parse_file(config.lemma_path)
    _, ipas = _repositories(config)

    result = PhoneticService(config, ipas).fetch_missing(entries, progress)
    presenter.show_fetch_result(result)
    return 0
