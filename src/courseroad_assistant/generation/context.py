"""
Context Assembly
=================
Turns the student's selection plus the two requirement corpora into a bounded
context block:
  1. Program summary, always included, capped at 8k chars
  2. Detailed sections for the selected Course 6 programs, joined by a blank line
  3. Falls back to the whole detailed corpus if no section could be found
  4. Detail text capped at 20k chars

Nothing here raises: a missing section or an empty corpus just produces a
broader or emptier context.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from ..corpus.extractor import SectionExtractor
from ..corpus.store import Corpus

logger = logging.getLogger(__name__)

TRUNCATION_NOTE = "\n\n[Note: this text was shortened to fit the context limit.]"

SECTION_SEPARATOR = "\n\n"


def truncate(text: str, limit: int) -> str:
    """Hard character cut; appends TRUNCATION_NOTE when anything was dropped."""
    if len(text) <= limit:
        return text
    return text[:limit] + TRUNCATION_NOTE


@dataclass(frozen=True)
class SelectionContext:
    """What the student has on their road for this chat turn."""
    subjects: tuple[str, ...] = ()
    programs: tuple[str, ...] = ()

    @classmethod
    def of(cls, subjects: Iterable[str] = (), programs: Iterable[str] = ()) -> "SelectionContext":
        return cls(tuple(subjects), tuple(programs))


@dataclass(frozen=True)
class AssembledContext:
    summary_text: str
    detail_text: str
    targets: tuple[str, ...] = ()
    used_fallback: bool = False


@dataclass
class ContextLimits:
    summary_chars: int = 8000
    detail_chars: int = 20000


class ContextAssembler:
    """Builds an AssembledContext from a selection and the loaded corpora."""

    def __init__(
        self,
        extractor: Optional[SectionExtractor] = None,
        limits: Optional[ContextLimits] = None,
    ):
        self.extractor = extractor or SectionExtractor()
        self.limits = limits or ContextLimits()

    def targets(self, programs: Iterable[str]) -> tuple[str, ...]:
        """Selected programs that have sections in the detailed corpus."""
        return tuple(p for p in programs if self.extractor.is_detailed(p))

    def assemble(
        self,
        selection: SelectionContext,
        summary: Corpus,
        detailed: Corpus,
    ) -> AssembledContext:
        summary_text = truncate(summary.text, self.limits.summary_chars)
        targets = self.targets(selection.programs)

        if not targets:
            return AssembledContext(summary_text=summary_text, detail_text="")

        sections = [self.extractor.extract(detailed, t) for t in targets]
        found = [s for s in sections if s is not None]

        used_fallback = not found
        if used_fallback:
            logger.warning(
                f"No detailed section found for {', '.join(targets)}; "
                f"using full '{detailed.name}' corpus"
            )
            detail_text = detailed.text
        else:
            detail_text = SECTION_SEPARATOR.join(found)

        logger.debug(
            f"Context: summary={len(summary_text)} chars, detail={len(detail_text)} chars "
            f"({len(found)}/{len(targets)} sections)"
        )

        return AssembledContext(
            summary_text=summary_text,
            detail_text=truncate(detail_text, self.limits.detail_chars),
            targets=targets,
            used_fallback=used_fallback,
        )
