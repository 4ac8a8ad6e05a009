"""
Chat Client — OpenAI chat completions
=======================================
Sends one system + user message pair and returns the assistant's text.
  - No automatic retries: every failure surfaces immediately
  - Failures are mapped to MissingCredentialError / InvalidCredentialError /
    TransportError
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from openai import AsyncOpenAI, AuthenticationError, OpenAIError

from ..exceptions import InvalidCredentialError, MissingCredentialError, TransportError

logger = logging.getLogger(__name__)


@dataclass
class LLMConfig:
    model: str = "gpt-3.5-turbo"
    temperature: float = 0.3        # low = consistent, structured replies
    max_tokens: int = 500
    base_url: Optional[str] = None  # None = api.openai.com


class ChatClient:
    """
    OpenAI chat completions client.

    Usage:
        client = ChatClient(api_key="sk-...")
        answer = await client.send("What do I still need for 6-3?", system_prompt)
    """

    def __init__(self, api_key: str = "", config: Optional[LLMConfig] = None):
        self.cfg = config or LLMConfig()
        self.api_key = api_key or ""
        self._client: Optional[AsyncOpenAI] = None
        logger.info(f"ChatClient initialised: model={self.cfg.model}, credential={'yes' if self.has_credential() else 'no'}")

    def has_credential(self) -> bool:
        return bool(self.api_key.strip())

    def set_api_key(self, api_key: str) -> None:
        """Replace the credential; the SDK client is rebuilt on next send."""
        self.api_key = api_key or ""
        self._client = None

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self.api_key,
                base_url=self.cfg.base_url,
                max_retries=0,
            )
        return self._client

    async def send(self, user_message: str, system_prompt: str) -> str:
        """Send the chat turn and return the assistant's reply text."""
        if not self.has_credential():
            raise MissingCredentialError("OpenAI API key not set")

        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user",   "content": user_message},
        ]

        try:
            response = await self._get_client().chat.completions.create(
                model=self.cfg.model,
                messages=messages,
                temperature=self.cfg.temperature,
                max_tokens=self.cfg.max_tokens,
            )
        except AuthenticationError as e:
            logger.error(f"OpenAI rejected the API key: {e}")
            raise InvalidCredentialError(str(e)) from e
        except OpenAIError as e:
            logger.error(f"Error calling OpenAI API: {e}")
            raise TransportError(str(e)) from e

        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            logger.error(f"Malformed chat completion response: {e}")
            raise TransportError("malformed response") from e
        if content is None:
            raise TransportError("response has no message content")

        return content.strip()
