"""Remote API related exceptions."""

from .base import LemmaDecksException


class MeaningFetchError(LemmaDecksException):
    """Raised when the chat-completion call or its payload fails."""

    pass


class AudioDownloadError(LemmaDecksException):
    """Raised when a text-to-speech download fails."""

    pass


class PhoneticLookupError(LemmaDecksException):
    """Raised when a single dictionary lookup fails (recoverable per word)."""

    pass
