"""Configuration management for Lemma Decks."""

from .config import LemmaDecksConfig
from .defaults import create_config_from_env, create_default_config

__all__ = ["LemmaDecksConfig", "create_default_config", "create_config_from_env"]
