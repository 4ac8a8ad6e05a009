"""
Course Assistant
=================
Orchestrates one chat turn:
  1. Wait for the requirement corpora (loaded once, shared)
  2. Extract / merge the sections for the selected Course 6 programs
  3. Render the system prompt
  4. Call the chat endpoint and turn failures into student-facing messages
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .context import AssembledContext, ContextAssembler, ContextLimits, SelectionContext
from .llm_client import ChatClient, LLMConfig
from .prompts import render
from ..config.settings import Settings
from ..corpus.extractor import ExtractorConfig, SectionExtractor
from ..corpus.store import DETAILED_REQUIREMENTS, PROGRAM_SUMMARY, CorpusStore
from ..exceptions import ChatError, MissingCredentialError

logger = logging.getLogger(__name__)


@dataclass
class AssistantReply:
    answer: str                     # assistant text, or the user-facing error message
    ok: bool = True
    error: Optional[str] = None     # exception class name when ok is False


class CourseAssistant:
    """
    Full pipeline: corpora → context → system prompt → chat completion.

    Usage:
        assistant = CourseAssistant.from_settings(settings)
        reply = await assistant.reply("Which classes count for 6-3?", selection)
        print(reply.answer)
    """

    def __init__(
        self,
        store: CorpusStore,
        chat_client: ChatClient,
        assembler: Optional[ContextAssembler] = None,
    ):
        self.store = store
        self.chat = chat_client
        self.assembler = assembler or ContextAssembler(store.extractor)

    # ------------------------------------------------------------------
    # Factory
    # ------------------------------------------------------------------

    @classmethod
    def from_settings(cls, settings: Settings) -> "CourseAssistant":
        """Wire the store, extractor, assembler and chat client from settings."""
        extractor = SectionExtractor(ExtractorConfig(
            program_prefix=settings.program_prefix,
            course=settings.detailed_course,
            keywords=tuple(settings.section_keywords),
        ))
        store = CorpusStore(
            summary_locator=settings.summary_corpus,
            detailed_locator=settings.detailed_corpus,
            fetch_timeout=settings.fetch_timeout,
            extractor=extractor,
        )
        chat = ChatClient(
            api_key=settings.openai_api_key,
            config=LLMConfig(
                model=settings.llm_model,
                temperature=settings.llm_temperature,
                max_tokens=settings.llm_max_tokens,
                base_url=settings.openai_base_url,
            ),
        )
        assembler = ContextAssembler(
            extractor,
            ContextLimits(
                summary_chars=settings.summary_char_limit,
                detail_chars=settings.detail_char_limit,
            ),
        )
        return cls(store, chat, assembler)

    # ------------------------------------------------------------------
    # Prompt
    # ------------------------------------------------------------------

    async def build_context(self, selection: SelectionContext) -> tuple[AssembledContext, str]:
        """Assemble the context and render the system prompt for ``selection``."""
        summary = await self.store.get_corpus(PROGRAM_SUMMARY)
        detailed = await self.store.get_corpus(DETAILED_REQUIREMENTS)

        context = self.assembler.assemble(selection, summary, detailed)
        prompt = render(selection, context, context.targets)
        return context, prompt

    # ------------------------------------------------------------------
    # Chat turn
    # ------------------------------------------------------------------

    async def reply(self, message: str, selection: SelectionContext) -> AssistantReply:
        """Answer ``message``; chat failures come back as a non-ok reply."""
        if not self.chat.has_credential():
            # Skip corpus work when the request cannot be sent anyway
            return _failed(MissingCredentialError("OpenAI API key not set"))

        context, prompt = await self.build_context(selection)
        logger.info(
            f"Chat turn: {len(selection.subjects)} subjects, programs={list(selection.programs)}, "
            f"prompt={len(prompt)} chars, fallback={context.used_fallback}"
        )

        try:
            answer = await self.chat.send(message, prompt)
        except ChatError as e:
            return _failed(e)
        return AssistantReply(answer=answer)


def _failed(error: ChatError) -> AssistantReply:
    logger.warning(f"Chat turn failed: {type(error).__name__}: {error}")
    return AssistantReply(answer=error.user_message, ok=False, error=type(error).__name__)
