"""
Prompt Templates
=================
The CourseRoad system prompt, kept in one place for easy tuning.
render() is pure: the same inputs always produce byte-identical output.
"""

from __future__ import annotations

import json
from typing import Sequence

from .context import AssembledContext, SelectionContext

SYSTEM_PROMPT_TEMPLATE = """You are an AI assistant for MIT CourseRoad, a course planning tool for MIT students. \
You help students plan their academic journey by providing information about subjects, degree requirements \
and programs of study. Base your answers on the requirement excerpts below. If they do not cover the \
question, say so rather than making something up.

Formatting rules:
- Reply in plain text only. Do not use Markdown, HTML, tables or code blocks
- Refer to a subject by its number followed by its title, e.g. "6.1010 Fundamentals of Programming"
- Put each suggested subject on its own line starting with "- "
- Group requirement explanations under a short label ending in a colon, e.g. "Foundation:"
- Keep answers under 250 words unless the student asks for more detail

Student's current selection:
Selected Subjects: {subjects}
Programs of Study: {programs}

PROGRAM SUMMARY:
{summary}"""

DETAIL_BLOCK_TEMPLATE = """

DETAILED PROGRAM REQUIREMENTS:
{detail}"""

PRIORITY_TEMPLATE = """

Prioritize the requirements of these programs in your answer: {targets}"""


def render(
    selection: SelectionContext,
    context: AssembledContext,
    targets: Sequence[str],
) -> str:
    """Render the system message for one chat turn."""
    prompt = SYSTEM_PROMPT_TEMPLATE.format(
        subjects=json.dumps(list(selection.subjects)),
        programs=json.dumps(list(selection.programs)),
        summary=context.summary_text,
    )
    if context.detail_text:
        prompt += DETAIL_BLOCK_TEMPLATE.format(detail=context.detail_text)
    if targets:
        prompt += PRIORITY_TEMPLATE.format(targets=", ".join(targets))
    return prompt
