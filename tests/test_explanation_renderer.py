"""Tests for explanation composition and Markdown rendering."""

from pattern_quiz.constants.quiz_constants import DEFAULT_TIP
from pattern_quiz.core.explanation_renderer import ExplanationRenderer, compose_explanation
from tests.factories import make_question


def test_compose_joins_explanation_code_and_tip():
    question = make_question("q", 0, explanation="Because.", code_example="x = 1", tip="Keep it small.")
    assert compose_explanation(question) == "Because.\n\n```\nx = 1\n```\n\n**Tip:** Keep it small."


def test_compose_falls_back_to_default_tip():
    question = make_question("q", 0)
    assert compose_explanation(question) == f"**Tip:** {DEFAULT_TIP}"


def test_render_fragment_produces_html():
    html = ExplanationRenderer().render_fragment("Because.\n\n```\nx = 1\n```")
    assert "<p>Because.</p>" in html
    assert "<pre><code>x = 1\n</code></pre>" in html


def test_render_fragment_escapes_raw_html():
    html = ExplanationRenderer().render_fragment("<script>alert(1)</script>")
    assert "<script>" not in html


def test_render_fragment_of_empty_text():
    assert ExplanationRenderer().render_fragment(None) == ""
    assert ExplanationRenderer().render_fragment("   ") == ""


def test_code_containing_a_fence_stays_in_one_block():
    code = 'doc = """\n```\nexample\n```\n"""'
    question = make_question("q", 0, code_example=code)
    composed = compose_explanation(question)
    assert composed.startswith(f"````\n{code}\n````")

    html = ExplanationRenderer().render_fragment(composed)
    assert html.count("<pre><code>") == 1
    assert "```\nexample\n```" in html
