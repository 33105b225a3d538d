"""
Lemma Decks - Frequency-Balanced Anki Deck Builder

Builds Anki flashcard decks from a word-frequency lemma list, enriched
with LLM-written meanings and examples, phonetic transcriptions, TTS
audio and generated illustrations.
"""

__version__ = "1.0.0"
__author__ = "Lemma Decks Contributors"
