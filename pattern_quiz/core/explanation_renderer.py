"""Explanation text shown after an answer is checked, and its Markdown rendering.

Architecture note:
    The engine only produces Markdown. Each rendering layer turns it into
    whatever it displays: the learner page and the Qt window both ask the
    shared renderer for HTML, so code samples and tips look the same in both.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import re

from markdown_it import MarkdownIt

from pattern_quiz.constants.quiz_constants import DEFAULT_TIP, TIP_PREFIX
from pattern_quiz.core.models import Question


def compose_explanation(question: Question) -> str:
    """Join explanation, code example and tip into one Markdown document."""
    paragraphs: list[str] = []
    if question.explanation and question.explanation.strip():
        paragraphs.append(question.explanation.strip())
    if question.code_example and question.code_example.strip():
        code = question.code_example.strip("\n")
        longest_run = max((len(run) for run in re.findall(r"`+", code)), default=0)
        fence = "`" * max(3, longest_run + 1)
        paragraphs.append(f"{fence}\n{code}\n{fence}")
    tip = question.tip.strip() if question.tip and question.tip.strip() else DEFAULT_TIP
    paragraphs.append(f"**{TIP_PREFIX}** {tip}")
    return "\n\n".join(paragraphs)


@dataclass(slots=True)
class ExplanationRenderer:
    """Converts explanation Markdown into HTML fragments."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str | None) -> str:
        """Render a markdown string into an HTML fragment."""

        sanitized = (markdown_text or "").strip()
        if not sanitized:
            return ""
        return self._markdown.render(sanitized)


renderer = ExplanationRenderer()
# Shared instance; MarkdownIt is safe for concurrent read-only renders.
