"""
FastAPI Application
====================
Entry point for the CourseRoad assistant API.

Run with:
    uvicorn courseroad_assistant.api.app:app --host 0.0.0.0 --port 8000 --reload
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from .routes import router
from ..config.settings import settings
from ..generation.assistant import CourseAssistant
from ..utils.logger import setup_logger

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Lifespan — build the assistant once and start loading the corpora
# ---------------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logger("courseroad_assistant", settings.log_level)
    logger.info("Initialising CourseRoad assistant...")
    app.state.assistant = CourseAssistant.from_settings(settings)
    app.state.api_bearer_token = settings.api_bearer_token
    # Loads in the background; the first request waits on the same load
    app.state.assistant.store.initialize()
    yield
    logger.info("Shutting down")


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------
app = FastAPI(
    title="CourseRoad Assistant API",
    description="Degree-requirement aware chat assistant for MIT CourseRoad",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],       # tighten in production
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api/v1")


@app.get("/", include_in_schema=False)
async def root():
    return RedirectResponse(url="/docs")
