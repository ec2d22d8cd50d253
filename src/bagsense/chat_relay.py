"""
Completion relay to the hosted LLM.

Uses the Anthropic async SDK.  The assembled conversation is
``[system, *history, user]``; the system entry is passed as the ``system``
argument and the remaining turns as ``messages``.

One completion call is made per chat turn, with no retries.
"""

from __future__ import annotations

import logging
from typing import AsyncIterator, Optional, Sequence

import anthropic

from .models import ChatMessage

logger = logging.getLogger(__name__)

FALLBACK_REPLY = "Sorry, couldn't process that."


class RelayError(RuntimeError):
    """Raised when the relay cannot reach the LLM provider at all."""


class ChatRelay:
    """Thin wrapper binding one provider configuration to the SDK client."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: Optional[str] = None,
        model: str,
        max_tokens: int = 1024,
        temperature: float = 0.7,
        timeout: float = 60.0,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url or None
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self._timeout = timeout
        self._client: Optional[anthropic.AsyncAnthropic] = None

    # ------------------------------------------------------------------
    # Client lifecycle
    # ------------------------------------------------------------------

    def _get_client(self) -> anthropic.AsyncAnthropic:
        if self._client is not None:
            return self._client
        if not self._api_key:
            raise RelayError("LLM_API_KEY environment variable not set")
        self._client = anthropic.AsyncAnthropic(
            api_key=self._api_key,
            base_url=self._base_url,
            timeout=self._timeout,
        )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None

    # ------------------------------------------------------------------
    # Completions
    # ------------------------------------------------------------------

    async def complete(self, messages: Sequence[ChatMessage]) -> str:
        """Return the full answer for *messages* in one call."""
        system, turns = split_system(messages)
        client = self._get_client()
        message = await client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            system=system,
            messages=turns,
        )
        logger.info(
            "LLM completion | model=%s input_tokens=%d output_tokens=%d",
            self.model,
            message.usage.input_tokens,
            message.usage.output_tokens,
        )
        text = "".join(
            block.text for block in message.content if getattr(block, "type", "") == "text"
        )
        return text or FALLBACK_REPLY

    async def stream(self, messages: Sequence[ChatMessage]) -> AsyncIterator[str]:
        """Yield text deltas for *messages* in arrival order."""
        system, turns = split_system(messages)
        client = self._get_client()
        async with client.messages.stream(
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            system=system,
            messages=turns,
        ) as stream:
            async for text in stream.text_stream:
                if text:
                    yield text


def split_system(messages: Sequence[ChatMessage]) -> tuple[str, list[dict[str, str]]]:
    """Separate system prompts from conversational turns."""
    system_parts = [m.content for m in messages if m.role == "system"]
    turns = [
        {"role": m.role, "content": m.content}
        for m in messages
        if m.role != "system"
    ]
    return "\n\n".join(system_parts), turns
