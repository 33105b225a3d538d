"""Default configuration values for Lemma Decks."""

import os
from pathlib import Path

from dotenv import load_dotenv

from .config import LemmaDecksConfig

TOKEN_ENV_VAR = "OPENROUTER_API_TOKEN"
PROXIES_ENV_VAR = "LEMMA_DECKS_PROXIES"


def create_default_config(**overrides) -> LemmaDecksConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        LemmaDecksConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            image_workers=4,
            deck_share=0.25,
        )
    """
    return LemmaDecksConfig(**overrides)


def create_config_from_env(env_file: Path | str = ".env", **overrides) -> LemmaDecksConfig:
    """Create a configuration from the process environment.

    The dotfile is loaded first (if present) without overriding
    variables already set in the environment.

    Args:
        env_file: Path to the dotfile holding secrets
        **overrides: Keyword arguments that win over environment values

    Returns:
        LemmaDecksConfig with environment values and overrides applied
    """
    load_dotenv(env_file)

    values: dict = {}
    token = os.environ.get(TOKEN_ENV_VAR, "")
    if token:
        values["llm_api_token"] = token

    proxies = os.environ.get(PROXIES_ENV_VAR)
    if proxies is not None:
        values["proxies"] = tuple(p.strip() for p in proxies.split(",") if p.strip())

    values.update(overrides)
    return LemmaDecksConfig(**values)
