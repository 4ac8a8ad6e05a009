"""
API Request / Response Models
================================
Pydantic models for FastAPI endpoints.
"""

from pydantic import BaseModel, Field
from typing import Optional


class SelectionRequest(BaseModel):
    selected_subjects: list[str] = Field(default_factory=list, description="Subject numbers on the student's road, e.g. '6.1010'")
    programs: list[str] = Field(default_factory=list, description="Declared programs of study, e.g. 'major6-3'")


class ChatRequest(SelectionRequest):
    message: str = Field(..., min_length=1, description="The student's chat message")


class ChatResponse(BaseModel):
    answer: str
    ok: bool
    error: Optional[str] = None


class PromptResponse(BaseModel):
    system_prompt: str
    targets: list[str]
    used_fallback: bool
    summary_chars: int
    detail_chars: int


class HealthResponse(BaseModel):
    status: str
    corpora_loaded: bool
    credential_configured: bool
    model: str
