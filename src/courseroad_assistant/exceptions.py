"""
Exceptions
===========
Corpus loading failures are logged and never leave the store; chat failures
carry the fixed message shown to the student.
"""


class CorpusLoadError(Exception):
    """One of the requirement corpora could not be fetched or decoded."""

    def __init__(self, locator: str, reason: str):
        self.locator = locator
        self.reason = reason
        super().__init__(f"Failed to load corpus from {locator}: {reason}")


class ChatError(Exception):
    """Base class for chat completion failures."""

    user_message = "Failed to get a response from the AI. Please try again later."


class MissingCredentialError(ChatError):
    user_message = "OpenAI API key not set. Please set your API key first."


class InvalidCredentialError(ChatError):
    user_message = "Invalid API key. Please check your OpenAI API key."


class TransportError(ChatError):
    """Network failure, non-auth API error or an unreadable response."""
