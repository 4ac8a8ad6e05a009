"""
Requirements Corpus Store
==========================
Loads the two plain-text requirement corpora once and keeps them resident:
  - program summary        (short overview of every EECS program)
  - detailed requirements  (one section per Course 6 program)

Loading is single-flight: however many coroutines ask for the corpora, at most
one fetch of the pair is ever in flight, and a finished load (successful or
not) is never repeated. A failed load leaves both corpora empty.
"""

from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import dataclass
from functools import cached_property
from pathlib import Path
from typing import Optional

import requests

from .extractor import SectionExtractor
from ..exceptions import CorpusLoadError

logger = logging.getLogger(__name__)

_LINE = re.compile(r"[^\n]*\n|[^\n]+\Z")

PROGRAM_SUMMARY = "program_summary"
DETAILED_REQUIREMENTS = "detailed_requirements"


@dataclass(frozen=True)
class Corpus:
    """Immutable plain-text document, addressable line by line."""
    name: str
    text: str = ""

    @cached_property
    def lines(self) -> tuple[str, ...]:
        # Split on "\n" only; form feeds and lone "\r" stay inside a line.
        # Endings are kept so that joined lines are an exact substring
        return tuple(_LINE.findall(self.text))

    def __len__(self) -> int:
        return len(self.text)


class CorpusStore:
    """
    Owns the program-summary and detailed-requirements corpora.

    Usage:
        store = CorpusStore("data/summary.txt", "https://.../detailed.txt")
        store.initialize()              # optional, inside a running loop: start loading now
        summary = await store.get_summary()
    """

    def __init__(
        self,
        summary_locator: str,
        detailed_locator: str,
        fetch_timeout: float = 30.0,
        extractor: Optional[SectionExtractor] = None,
    ):
        self.locators = {
            PROGRAM_SUMMARY: summary_locator,
            DETAILED_REQUIREMENTS: detailed_locator,
        }
        self.fetch_timeout = fetch_timeout
        self.extractor = extractor or SectionExtractor()
        self._corpora = {name: Corpus(name) for name in self.locators}
        self._loaded = False
        self._load_task: Optional[asyncio.Task] = None

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self) -> asyncio.Task:
        """Start the one load task if it has not been started yet.

        Must be called from a running event loop (e.g. the app lifespan);
        raises RuntimeError otherwise.
        """
        if self._load_task is None:
            loop = asyncio.get_running_loop()
            self._load_task = loop.create_task(self.load())
        return self._load_task

    async def ensure_loaded(self) -> bool:
        """Wait for the shared load to finish. Never triggers a second fetch."""
        if self._loaded:
            return True
        task = self.initialize()
        # A cancelled caller must not cancel the load other callers wait on
        return await asyncio.shield(task)

    async def load(self) -> bool:
        """
        Fetch both corpora concurrently and store them.

        Returns False (and keeps both corpora empty) if either fetch fails.
        Prefer ensure_loaded(); calling this directly bypasses single-flight.
        """
        names = list(self.locators)
        logger.info(f"Loading requirement corpora: {', '.join(self.locators.values())}")

        try:
            texts = await asyncio.gather(*(self._fetch(self.locators[n]) for n in names))
        except CorpusLoadError as e:
            logger.error(f"Error loading requirements data: {e}")
            self._loaded = False
            return False

        for name, text in zip(names, texts):
            self._corpora[name] = Corpus(name, text)
        self._loaded = True

        sizes = ", ".join(f"{n}={len(self._corpora[n])} chars" for n in names)
        logger.info(f"Requirements data loaded successfully ({sizes})")
        return True

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    async def get_corpus(self, name: str) -> Corpus:
        await self.ensure_loaded()
        return self._corpora[name]

    async def get_summary(self) -> str:
        """Program summary text ('' if loading failed)."""
        return (await self.get_corpus(PROGRAM_SUMMARY)).text

    async def get_detailed(self) -> str:
        """Detailed requirements text ('' if loading failed)."""
        return (await self.get_corpus(DETAILED_REQUIREMENTS)).text

    async def get_all(self) -> dict[str, str]:
        await self.ensure_loaded()
        return {name: corpus.text for name, corpus in self._corpora.items()}

    async def get_program_requirements(self, program_id: str) -> Optional[str]:
        """Detailed requirements section for one program, or None."""
        corpus = await self.get_corpus(DETAILED_REQUIREMENTS)
        return self.extractor.extract(corpus, program_id)

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------

    async def _fetch(self, locator: str) -> str:
        if locator.startswith(("http://", "https://")):
            return await asyncio.to_thread(self._fetch_url, locator)
        return await asyncio.to_thread(self._read_file, locator)

    def _fetch_url(self, url: str) -> str:
        try:
            response = requests.get(url, timeout=self.fetch_timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise CorpusLoadError(url, str(e)) from e
        response.encoding = "utf-8"
        return response.text

    def _read_file(self, path: str) -> str:
        try:
            return Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CorpusLoadError(path, str(e)) from e
