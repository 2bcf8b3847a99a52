"""Utilities for importing question banks from a human-friendly text file.

File format (repeat blocks separated by blank lines or '---'):

    TITLE: Bank title (optional, in its own block before the first question)

    ID: stable-question-id   (optional, defaults to q1, q2, ...)
    Q: Question text. Additional lines until the next marker are treated as
       part of the question.
    A: First option text
    B: Second option text
    ...                      (two to eight options, A-H, no gaps; listed before
                              CORRECT and the sections below)
    CORRECT: B               (exactly one letter)
    EXPLANATION: Why the correct option is right (optional, may span lines)
    CODE: first line of a code sample (optional, following lines are kept
          verbatim; only a marker at the start of a line ends the sample,
          and a blank line ends the block)
    TIP: A short practical hint (optional)

Example:

    Q: Which pattern converts one interface into another that clients expect?
    A: Adapter
    B: Bridge
    C: Decorator
    CORRECT: A
    EXPLANATION: An Adapter wraps an existing class behind the interface the client needs.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path

from pattern_quiz.core.models import Option, Question

logger = logging.getLogger(__name__)


class QuizImportError(Exception):
    """Raised when a question bank cannot be parsed."""


@dataclass(slots=True)
class ImportedQuiz:
    """Container for imported bank metadata and questions."""

    source_path: Path | None
    title: str | None
    questions: list[Question]


_OPTION_ORDER = ["A", "B", "C", "D", "E", "F", "G", "H"]
_TEXT_KEYS = ("Q", "EXPLANATION", "CODE", "TIP")


def load_quiz_from_file(file_path: Path) -> ImportedQuiz:
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise QuizImportError(f"Could not read question bank {file_path}: {exc}") from exc
    imported = parse_quiz_text(text)
    imported.source_path = file_path
    logger.info("Loaded %d questions from %s", len(imported.questions), file_path)
    return imported


def parse_quiz_text(text: str) -> ImportedQuiz:
    title: str | None = None
    questions: list[Question] = []
    seen_ids: set[str] = set()

    for block in _split_blocks(text):
        first_line = block[0].strip()
        if first_line.upper().startswith("TITLE:") and len(block) == 1:
            if questions or title is not None:
                raise QuizImportError("TITLE must appear once, before the first question.")
            title = first_line.split(":", 1)[1].strip() or None
            continue

        question = _parse_block(block, default_id=f"q{len(questions) + 1}")
        if question.id in seen_ids:
            raise QuizImportError(f"Duplicate question ID '{question.id}'.")
        seen_ids.add(question.id)
        questions.append(question)

    if not questions:
        raise QuizImportError("Question bank did not contain any questions.")
    return ImportedQuiz(source_path=None, title=title, questions=questions)


def _split_blocks(text: str) -> list[list[str]]:
    blocks: list[list[str]] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == "---" or not stripped:
            if current_block:
                blocks.append(current_block)
                current_block = []
            continue
        current_block.append(raw_line.rstrip())
    if current_block:
        blocks.append(current_block)
    return blocks


def _parse_block(block: list[str], default_id: str) -> Question:
    question_id: str | None = None
    sections: dict[str, list[str]] = {}
    options: dict[str, list[str]] = {}
    correct_letter: str | None = None
    current_section: str | None = None
    options_closed = False

    for raw_line in block:
        line = raw_line.strip()
        upper = line.upper()

        key = _match_key(upper)
        if current_section == "CODE" and (key is None or raw_line[:1].isspace()):
            sections["CODE"].append(raw_line)
            continue

        if key == "ID":
            question_id = line.split(":", 1)[1].strip()
            current_section = None
            continue
        if key == "CORRECT":
            correct_letter = line.split(":", 1)[1].strip().upper()
            current_section = None
            options_closed = True
            continue
        if key in _TEXT_KEYS:
            if key in sections:
                raise QuizImportError(f"{key}: appears twice in one question.")
            value = raw_line.split(":", 1)[1]
            sections[key] = [value.strip()] if key != "CODE" else [value.lstrip(" ")]
            current_section = key
            options_closed = options_closed or key != "Q"
            continue

        if not options_closed and len(line) > 2 and line[0].upper() in _OPTION_ORDER and line[1] == ":":
            letter = line[0].upper()
            if letter in options:
                raise QuizImportError(f"Option {letter} is defined twice.")
            options[letter] = [line[2:].strip()]
            current_section = letter
            continue

        if current_section in _TEXT_KEYS:
            sections[current_section].append(line)
        elif current_section in _OPTION_ORDER:
            options[current_section].append(line)
        else:
            raise QuizImportError(f"Encountered text outside of a known section: '{line}'.")

    prompt = "\n".join(sections.get("Q", [])).strip()
    if not prompt:
        raise QuizImportError("Question text missing (Q: ...)")

    letters = _OPTION_ORDER[: len(options)]
    if sorted(options) != letters:
        raise QuizImportError("Options must use consecutive letters starting at A.")
    if len(letters) < 2:
        raise QuizImportError("Each question must define at least two options.")

    if correct_letter is None:
        raise QuizImportError(f"Question '{prompt[:40]}' has no CORRECT: line.")
    if correct_letter not in letters:
        raise QuizImportError(f"CORRECT must be one of {', '.join(letters)}.")

    option_list = [
        Option(text="\n".join(options[letter]).strip(), is_correct=letter == correct_letter)
        for letter in letters
    ]

    try:
        return Question(
            id=question_id or default_id,
            prompt=prompt,
            options=tuple(option_list),
            explanation=_joined(sections.get("EXPLANATION")),
            code_example=_joined(sections.get("CODE"), verbatim=True),
            tip=_joined(sections.get("TIP")),
        )
    except ValueError as exc:
        raise QuizImportError(str(exc)) from exc


def _match_key(upper_line: str) -> str | None:
    for key in ("ID", "CORRECT", *_TEXT_KEYS):
        if upper_line.startswith(f"{key}:"):
            return key
    return None


def _joined(lines: list[str] | None, verbatim: bool = False) -> str | None:
    if not lines:
        return None
    text = "\n".join(lines)
    text = text.strip("\n") if verbatim else text.strip()
    return text or None
