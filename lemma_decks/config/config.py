"""Configuration classes for Lemma Decks."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class LemmaDecksConfig:
    """Immutable configuration for deck building and media fetching.

    All configuration is frozen (immutable) so worker threads can share
    a single instance without copying.
    """

    # Filesystem layout
    input_dir: Path = field(default_factory=lambda: Path("input"))
    output_dir: Path = field(default_factory=lambda: Path("output"))
    lemma_filename: str = "lemma.txt"
    meanings_filename: str = "meanings.json"
    ipas_filename: str = "ipas.json"
    audio_dirname: str = "audio"
    image_dirname: str = "img"
    deck_filename_template: str = "cards_deck_{index}.txt"

    # Meaning generation (chat completion)
    llm_api_url: str = "https://openrouter.ai/api/v1/chat/completions"
    llm_model: str = "deepseek/deepseek-chat-v3-0324:free"
    llm_api_token: str = ""
    llm_timeout: float = 600.0  # Ten minutes per batch
    meanings_batch_size: int = 200

    # Text-to-speech
    tts_api_url: str = "http://translate.google.com/translate_tts"
    tts_language: str = "en"
    tts_timeout: float | None = None

    # Image generation
    image_api_url: str = "https://image.pollinations.ai/prompt"
    image_timeout: float = 90.0
    image_workers: int = 10
    image_max_attempts: int = 15
    image_backoff_base: float = 0.5  # Seconds before the second attempt
    image_backoff_max: float = 30.0
    proxies: tuple[str, ...] = ("http://23.254.229.117:17407",)

    # Phonetic lookup
    dictionary_api_url: str = "https://api.dictionaryapi.dev/api/v2/entries/en"
    dictionary_delay: float = 0.4  # Seconds between API calls
    dictionary_timeout: float | None = None

    # Deck partitioning
    deck_share: float = 0.3  # Fraction of total frequency per deck

    def __post_init__(self):
        """Convert string paths to Path objects and lists to tuples."""
        if isinstance(self.input_dir, str):
            object.__setattr__(self, "input_dir", Path(self.input_dir))
        if isinstance(self.output_dir, str):
            object.__setattr__(self, "output_dir", Path(self.output_dir))
        if isinstance(self.proxies, list):
            object.__setattr__(self, "proxies", tuple(self.proxies))

    @property
    def lemma_path(self) -> Path:
        return self.input_dir / self.lemma_filename

    @property
    def audio_dir(self) -> Path:
        return self.output_dir / self.audio_dirname

    @property
    def image_dir(self) -> Path:
        return self.output_dir / self.image_dirname
