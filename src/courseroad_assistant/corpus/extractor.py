"""
Program Section Extractor
==========================
Finds the part of the detailed requirements corpus that describes a single
Course 6 program.

Strategy (line-oriented, heuristic):
  1. A line containing the program code (e.g. "6-3") AND one of the
     discipline keywords starts the section
  2. Every following line is kept until the next program header, i.e. a line
     starting with "6-<digit>" that does not mention the same code
  3. Only the first start counts; later mentions of the code are kept as
     ordinary section lines

Programs that share a numeric prefix are told apart only by the keyword
filter. This is not a document parser.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .store import Corpus

logger = logging.getLogger(__name__)


DEFAULT_KEYWORDS = (
    "Science",
    "Engineering",
    "Intelligence",
    "Computer",
    "Electrical",
    "Molecular",
)


@dataclass
class ExtractorConfig:
    # Identifier prefix shared by all majors ("major6-3", "major18")
    program_prefix: str = "major"

    # Course number whose programs have sections in the detailed corpus
    course: str = "6"

    # A header line must mention at least one of these
    keywords: tuple[str, ...] = field(default_factory=lambda: DEFAULT_KEYWORDS)

    @property
    def family_prefix(self) -> str:
        return f"{self.program_prefix}{self.course}"

    @property
    def header_pattern(self) -> re.Pattern:
        return re.compile(rf"^{re.escape(self.course)}-\d")


class SectionExtractor:
    """
    Extracts per-program requirement text from the detailed corpus.

    Usage:
        extractor = SectionExtractor()
        section = extractor.extract(corpus, "major6-3")
    """

    def __init__(self, config: Optional[ExtractorConfig] = None):
        self.cfg = config or ExtractorConfig()
        self._header = self.cfg.header_pattern

    def is_detailed(self, program_id: str) -> bool:
        """True if the program has its own section in the detailed corpus."""
        return program_id.startswith(self.cfg.family_prefix)

    def bare_code(self, program_id: str) -> str:
        """'major6-3' -> '6-3'"""
        return program_id.replace(self.cfg.program_prefix, "", 1)

    def extract(self, corpus: Corpus, program_id: str) -> Optional[str]:
        """
        Return the section of ``corpus`` describing ``program_id``.

        The result is the exact corpus substring from the start line up to,
        but not including, the next program header (or the end of the corpus).
        Returns None for programs outside the detailed family and for
        programs with no matching header.
        """
        if not self.is_detailed(program_id):
            return None

        code = self.bare_code(program_id)
        section: list[str] = []

        for line in corpus.lines:
            if not section:
                if self._is_start(line, code):
                    section.append(line)
                continue

            if self._is_terminator(line, code):
                break
            section.append(line)

        if not section:
            logger.debug(f"No section found for {program_id} in '{corpus.name}'")
            return None

        text = "".join(section)
        logger.debug(f"Extracted {program_id}: {len(section)} lines, {len(text)} chars")
        return text

    def _is_start(self, line: str, code: str) -> bool:
        return code in line and any(kw in line for kw in self.cfg.keywords)

    def _is_terminator(self, line: str, code: str) -> bool:
        return bool(self._header.match(line)) and code not in line
