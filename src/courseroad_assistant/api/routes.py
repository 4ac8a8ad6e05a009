"""
FastAPI Routes
===============
Endpoints:
  GET  /health   — corpora / credential status
  POST /prompt   — assemble the requirement context and show the system prompt
  POST /chat     — send a chat turn to the assistant
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .models import ChatRequest, ChatResponse, HealthResponse, PromptResponse, SelectionRequest
from ..generation.assistant import CourseAssistant
from ..generation.context import SelectionContext

logger = logging.getLogger(__name__)

router = APIRouter()

# ---------------------------------------------------------------------------
# Bearer-token auth dependency
# ---------------------------------------------------------------------------
_bearer_scheme = HTTPBearer(auto_error=False)


def _require_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Security(_bearer_scheme),
) -> None:
    """Check Authorization: Bearer <token>.

    If API_BEARER_TOKEN is not set on the server (local dev), auth is skipped.
    """
    token: str | None = getattr(request.app.state, "api_bearer_token", None)
    if token is None:
        return
    if credentials is None or credentials.credentials != token:
        raise HTTPException(status_code=401, detail="Invalid or missing API token")


def _assistant(request: Request) -> CourseAssistant:
    return request.app.state.assistant


def _selection(body: SelectionRequest) -> SelectionContext:
    return SelectionContext.of(body.selected_subjects, body.programs)


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------

@router.get("/health", response_model=HealthResponse, tags=["System"])
async def health(request: Request):
    """Report whether the corpora are loaded and an OpenAI key is configured."""
    assistant = _assistant(request)
    return HealthResponse(
        status="ok",
        corpora_loaded=assistant.store.is_loaded,
        credential_configured=assistant.chat.has_credential(),
        model=assistant.chat.cfg.model,
    )


# ---------------------------------------------------------------------------
# Prompt preview
# ---------------------------------------------------------------------------

@router.post("/prompt", response_model=PromptResponse, tags=["Assistant"],
             dependencies=[Depends(_require_token)])
async def prompt(request: Request, body: SelectionRequest):
    """Build the system prompt for a selection without calling the LLM."""
    context, system_prompt = await _assistant(request).build_context(_selection(body))
    return PromptResponse(
        system_prompt=system_prompt,
        targets=list(context.targets),
        used_fallback=context.used_fallback,
        summary_chars=len(context.summary_text),
        detail_chars=len(context.detail_text),
    )


# ---------------------------------------------------------------------------
# Chat
# ---------------------------------------------------------------------------

@router.post("/chat", response_model=ChatResponse, tags=["Assistant"],
             dependencies=[Depends(_require_token)])
async def chat(request: Request, body: ChatRequest):
    """
    Send the student's message with the assembled requirement context.
    Chat failures are returned as ok=false with a readable answer, not as HTTP errors.
    """
    logger.info(f"Chat: {body.message[:80]}")
    reply = await _assistant(request).reply(body.message, _selection(body))
    return ChatResponse(answer=reply.answer, ok=reply.ok, error=reply.error)
