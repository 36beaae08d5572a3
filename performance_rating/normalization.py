from __future__ import annotations

import math
import re
from dataclasses import replace
from typing import Sequence

import numpy as np

from performance_rating.logging import logger
from performance_rating.models import CompetencyScore

_NUMBER = re.compile(
    r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?|[+-]?(inf(inity)?|nan)",
    re.IGNORECASE | re.ASCII,
)

# (upper bound on the largest raw value, scale assumed for the sheet)
SCALE_THRESHOLDS: tuple[tuple[float, float], ...] = (
    (0.0, 100.0),
    (5.0, 4.0),
    (10.0, 10.0),
    (20.0, 20.0),
    (100.0, 100.0),
)


def parse_score_value(raw_value: str | None, numeric_value: float | None = None) -> float:
    if numeric_value is not None and math.isfinite(numeric_value):
        return float(numeric_value)
    text = (raw_value or "").strip().replace(",", ".")
    if not _NUMBER.fullmatch(text):
        return 0.0
    try:
        value = float(text)
    except ValueError:
        return 0.0
    if not math.isfinite(value):
        logger.warning("Non-finite score %r treated as 0", raw_value)
        return 0.0
    return value


def determine_scale(values: Sequence[float]) -> float:
    peak = max(0.0, float(np.max(values))) if len(values) else 0.0
    for bound, scale in SCALE_THRESHOLDS:
        if peak <= bound:
            return scale
    return peak


def normalize_scores(scores: Sequence[CompetencyScore]) -> tuple[list[CompetencyScore], float]:
    values = np.array(
        [parse_score_value(score.raw_value, score.numeric_value) for score in scores],
        dtype=float,
    )
    scale = determine_scale(values)
    if scale <= 0:
        normalized = np.zeros_like(values)
    else:
        normalized = np.clip((values / scale) * 100.0, 0.0, 100.0)
    logger.debug("Inferred scale %s from %d scores", scale, len(values))

    result = [
        replace(score, source_value=float(source), normalized=float(value))
        for score, source, value in zip(scores, values, normalized)
    ]
    return result, scale
