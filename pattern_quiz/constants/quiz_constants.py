"""Quiz-related constants shared across the engine and the rendering layers."""

from pathlib import Path

# Share of correct answers needed for the GOOD rating.
GOOD_SCORE_RATIO: float = 0.7

DEFAULT_TIP: str = (
    "Name the problem a pattern solves before reaching for it; "
    "a pattern applied without that problem only adds indirection."
)
TIP_PREFIX: str = "Tip:"

DEFAULT_QUESTION_BANK_PATH: Path = Path(__file__).resolve().parent.parent / "data" / "design_patterns_quiz.txt"
