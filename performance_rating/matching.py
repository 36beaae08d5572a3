from __future__ import annotations

import math
from typing import Sequence

from performance_rating.models import CompetencyScore
from performance_rating.rubric import RubricParameter
from performance_rating.text import contains_any, normalize_text


def clamp_score(value: float | None, low: float = 0.0, high: float = 100.0) -> float:
    if value is None or not math.isfinite(value):
        return 0.0
    return max(low, min(high, value))


def match_competency(
    scores: Sequence[CompetencyScore], parameter: RubricParameter
) -> CompetencyScore | None:
    for score in scores:
        if contains_any(normalize_text(score.name), parameter.targets):
            return score
    return None


def find_competency_score(scores: Sequence[CompetencyScore], parameter: RubricParameter) -> float:
    matched = match_competency(scores, parameter)
    if matched is None:
        return 0.0
    return clamp_score(matched.normalized)
