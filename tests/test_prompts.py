"""Tests for system prompt rendering."""

from courseroad_assistant.generation.context import AssembledContext, SelectionContext
from courseroad_assistant.generation.prompts import render

SELECTION = SelectionContext.of(["6.1010", "18.06"], ["major6-3", "major18"])


class TestRender:

    def test_is_deterministic(self):
        context = AssembledContext("summary", "detail", ("major6-3",))

        first = render(SELECTION, context, context.targets)
        second = render(SelectionContext.of(["6.1010", "18.06"], ["major6-3", "major18"]),
                        AssembledContext("summary", "detail", ("major6-3",)),
                        ["major6-3"])

        assert first == second

    def test_serializes_selection_as_json(self):
        prompt = render(SELECTION, AssembledContext("summary", ""), ())

        assert 'Selected Subjects: ["6.1010", "18.06"]' in prompt
        assert 'Programs of Study: ["major6-3", "major18"]' in prompt

    def test_summary_only_without_detail_or_targets(self):
        prompt = render(SELECTION, AssembledContext("EECS summary text", ""), ())

        assert prompt.endswith("PROGRAM SUMMARY:\nEECS summary text")
        assert "DETAILED PROGRAM REQUIREMENTS" not in prompt
        assert "Prioritize" not in prompt

    def test_detail_block_and_priority_directive(self):
        context = AssembledContext("summary", "6-3 Computer Science\n", ("major6-3", "major6-4"))

        prompt = render(SELECTION, context, context.targets)

        assert "DETAILED PROGRAM REQUIREMENTS:\n6-3 Computer Science\n" in prompt
        assert prompt.endswith("Prioritize the requirements of these programs in your answer: major6-3, major6-4")

    def test_section_order(self):
        context = AssembledContext("SUMMARY-BODY", "DETAIL-BODY", ("major6-3",))

        prompt = render(SELECTION, context, context.targets)

        positions = [
            prompt.index("You are an AI assistant for MIT CourseRoad"),
            prompt.index("Formatting rules:"),
            prompt.index("Selected Subjects:"),
            prompt.index("SUMMARY-BODY"),
            prompt.index("DETAIL-BODY"),
            prompt.index("Prioritize"),
        ]
        assert positions == sorted(positions)

    def test_braces_in_corpus_text_are_literal(self):
        prompt = render(SELECTION, AssembledContext("{subjects} {0}", "{detail}"), ())

        assert "PROGRAM SUMMARY:\n{subjects} {0}" in prompt
        assert "{detail}" in prompt

    def test_plain_text_directive_present(self):
        prompt = render(SelectionContext(), AssembledContext("", ""), ())

        assert "plain text only" in prompt
        assert "Selected Subjects: []" in prompt
