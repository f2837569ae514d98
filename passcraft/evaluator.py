"""
passcraft.evaluator

Heuristic password strength estimate:
- +1 for length >= 12, another +0.5 for length >= 16
- +1 for each of uppercase, lowercase, digit and "other" characters present
- +0.5 when at least 70% of the characters are distinct

The label is picked from the raw total, while the numeric score is the total
floored and capped at 4. Any total above 4 (at most 6.0) is "Very Strong" with
score 4. This is feedback for the user, not a security measurement.
"""

import math
import re
from dataclasses import dataclass
from typing import Tuple

LABEL_NONE = "None"
LABEL_WEAK = "Weak"
LABEL_MEDIUM = "Medium"
LABEL_STRONG = "Strong"
LABEL_VERY_STRONG = "Very Strong"

# weakest -> strongest
LABELS: Tuple[str, ...] = (LABEL_NONE, LABEL_WEAK, LABEL_MEDIUM, LABEL_STRONG, LABEL_VERY_STRONG)

MAX_SCORE = 4
UNIQUE_RATIO = 0.7

_CLASS_PATTERNS = (
    re.compile(r"[A-Z]"),
    re.compile(r"[a-z]"),
    re.compile(r"[0-9]"),
    re.compile(r"[^A-Za-z0-9]"),
)


@dataclass(frozen=True)
class StrengthResult:
    score: int
    label: str
    points: float = 0.0


def _points(password: str) -> float:
    points = 0.0

    length = len(password)
    if length >= 12:
        points += 1
    if length >= 16:
        points += 0.5

    for pattern in _CLASS_PATTERNS:
        if pattern.search(password):
            points += 1

    if len(set(password)) >= length * UNIQUE_RATIO:
        points += 0.5

    return points


def _label_for(points: float) -> str:
    if points >= 4:
        return LABEL_VERY_STRONG
    if points >= 3:
        return LABEL_STRONG
    if points >= 2:
        return LABEL_MEDIUM
    return LABEL_WEAK


def estimate(password: str) -> StrengthResult:
    """
    Score any string, including user-pasted text. Never raises.
    """
    if not password:
        return StrengthResult(score=0, label=LABEL_NONE, points=0.0)

    points = _points(password)
    return StrengthResult(
        score=min(MAX_SCORE, math.floor(points)),
        label=_label_for(points),
        points=points,
    )
