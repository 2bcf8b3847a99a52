"""Tests for the text question-bank importer."""

from pathlib import Path
import textwrap

import pytest

from pattern_quiz.constants.quiz_constants import DEFAULT_QUESTION_BANK_PATH
from pattern_quiz.core.quiz_importer import QuizImportError, load_quiz_from_file, parse_quiz_text


def _parse(text: str):
    return parse_quiz_text(textwrap.dedent(text))


def test_parses_title_and_questions():
    imported = _parse(
        """
        TITLE: Structural patterns

        ID: adapter
        Q: Which pattern converts an interface?
        A: Adapter
        B: Bridge
        CORRECT: A
        EXPLANATION: Adapters translate calls.

        ---

        Q: Which pattern adds behaviour by wrapping?
        A: Proxy
        B: Decorator
        C: Facade
        CORRECT: C
        TIP: Mind the wrapping order.
        """
    )
    assert imported.title == "Structural patterns"
    assert [q.id for q in imported.questions] == ["adapter", "q2"]
    first, second = imported.questions
    assert first.correct_index == 0
    assert first.explanation == "Adapters translate calls."
    assert second.option_count == 3
    assert second.correct_index == 2
    assert second.tip == "Mind the wrapping order."
    assert second.explanation is None


def test_multiline_prompt_and_code_are_preserved():
    imported = _parse(
        """
        Q: What does this print?
        Think about the override.
        A: base
        B: child
        CORRECT: B
        CODE: class Child(Base):
            def name(self):
                return "child"
        TIP: Dynamic dispatch.
        """
    )
    question = imported.questions[0]
    assert question.prompt == "What does this print?\nThink about the override."
    assert question.code_example == 'class Child(Base):\n    def name(self):\n        return "child"'
    assert question.tip == "Dynamic dispatch."


def test_indented_code_lines_that_look_like_markers_stay_in_code():
    imported = _parse(
        """
        ID: value-object
        Q: Which pattern does this dataclass illustrate?
        A: Value Object
        B: Singleton
        CORRECT: A
        CODE: class Point:
            id: int
            q: str
            x: float
        TIP: Compare by value.
        """
    )
    question = imported.questions[0]
    assert question.id == "value-object"
    assert question.code_example == "class Point:\n    id: int\n    q: str\n    x: float"
    assert question.tip == "Compare by value."


def test_option_shaped_lines_after_options_continue_the_section():
    imported = _parse(
        """
        Q: Why use an Adapter?
        A: To reuse a class with the wrong interface
        B: To add behaviour at runtime
        CORRECT: A
        EXPLANATION: Two reasons.
        C: it wraps the adaptee
        TIP: Keep adapters thin.
        D: they only translate calls
        """
    )
    question = imported.questions[0]
    assert question.option_count == 2
    assert question.explanation == "Two reasons.\nC: it wraps the adaptee"
    assert question.tip == "Keep adapters thin.\nD: they only translate calls"


def test_option_after_correct_is_rejected():
    with pytest.raises(QuizImportError, match="outside of a known section"):
        parse_quiz_text("Q: q\nA: x\nB: y\nCORRECT: A\nC: z")


@pytest.mark.parametrize(
    "text, message",
    [
        ("A: x\nB: y\nCORRECT: A", "Question text missing"),
        ("Q: q\nA: x\nCORRECT: A", "at least two options"),
        ("Q: q\nA: x\nC: y\nCORRECT: A", "consecutive letters"),
        ("Q: q\nA: x\nB: y", "no CORRECT"),
        ("Q: q\nA: x\nB: y\nCORRECT: D", "CORRECT must be one of A, B"),
        ("Q: q\nA: x\nA: y\nCORRECT: A", "defined twice"),
        ("stray text\nQ: q\nA: x\nB: y\nCORRECT: A", "outside of a known section"),
        ("", "did not contain any questions"),
    ],
)
def test_invalid_blocks_raise(text, message):
    with pytest.raises(QuizImportError, match=message):
        parse_quiz_text(text)


def test_duplicate_ids_are_rejected():
    block = "ID: same\nQ: q\nA: x\nB: y\nCORRECT: A"
    with pytest.raises(QuizImportError, match="Duplicate question ID"):
        parse_quiz_text(f"{block}\n\n{block}")


def test_title_after_questions_is_rejected():
    with pytest.raises(QuizImportError, match="TITLE"):
        parse_quiz_text("Q: q\nA: x\nB: y\nCORRECT: A\n\nTITLE: late")


def test_load_quiz_from_file(tmp_path: Path):
    bank = tmp_path / "bank.txt"
    bank.write_text("Q: q\nA: x\nB: y\nCORRECT: B\n", encoding="utf-8")
    imported = load_quiz_from_file(bank)
    assert imported.source_path == bank
    assert imported.title is None
    assert imported.questions[0].correct_index == 1


def test_missing_file_raises_import_error(tmp_path: Path):
    with pytest.raises(QuizImportError, match="Could not read"):
        load_quiz_from_file(tmp_path / "missing.txt")


def test_bundled_bank_loads():
    imported = load_quiz_from_file(DEFAULT_QUESTION_BANK_PATH)
    assert imported.title == "Design patterns self-check"
    assert len(imported.questions) == 8
    adapter = next(q for q in imported.questions if q.id == "adapter-intent")
    assert adapter.code_example.startswith("class LegacyPrinterAdapter:")
