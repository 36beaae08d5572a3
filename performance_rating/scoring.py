from __future__ import annotations

import math
from typing import Sequence

from performance_rating.logging import logger
from performance_rating.matching import clamp_score, match_competency
from performance_rating.models import (
    CompetencyScore,
    EmployeeProfile,
    LeadershipResult,
    PositionType,
    ReportResult,
    ScoreComponent,
    SectionResult,
)
from performance_rating.normalization import normalize_scores
from performance_rating.positions import position_for
from performance_rating.rubric import (
    BEHAVIOR_CAP,
    BEHAVIOR_PARAMETERS,
    DEFAULT_LEADERSHIP_SCORE,
    LEADERSHIP_WEIGHT,
    LOWEST_RATING,
    QUALITY_CAPS,
    QUALITY_PARAMETERS,
    RATING_BANDS,
    TOTAL_CAP,
    RubricParameter,
)


def _to_component(parameter: str, raw_score: float, weight: float, matched: str | None) -> ScoreComponent:
    return ScoreComponent(
        parameter=parameter,
        raw_score=raw_score,
        weight_percentage=weight,
        weighted_score=(raw_score * weight) / 100.0,
        matched_competency=matched,
    )


def _score_section(
    scores: Sequence[CompetencyScore],
    parameters: Sequence[RubricParameter],
    position: PositionType,
    cap: float,
) -> SectionResult:
    components: list[ScoreComponent] = []
    for param in parameters:
        matched = match_competency(scores, param)
        raw = clamp_score(matched.normalized) if matched else 0.0
        components.append(
            _to_component(param.name, raw, param.weight_for(position), matched.name if matched else None)
        )
    subtotal = min(sum(c.weighted_score for c in components), cap)
    return SectionResult(components=tuple(components), cap=cap, subtotal=subtotal)


def calculate_behavior(scores: Sequence[CompetencyScore]) -> SectionResult:
    return _score_section(scores, BEHAVIOR_PARAMETERS, PositionType.STAFF, BEHAVIOR_CAP)


def calculate_quality(scores: Sequence[CompetencyScore], position: PositionType) -> SectionResult:
    return _score_section(scores, QUALITY_PARAMETERS, position, QUALITY_CAPS[position])


def has_performance_data(
    scores: Sequence[CompetencyScore], behavior: SectionResult, quality: SectionResult
) -> bool:
    return len(scores) > 0 and (behavior.subtotal > 0 or quality.subtotal > 0)


def compute_leadership(
    position: PositionType,
    has_data: bool,
    override_score: float | None = None,
) -> LeadershipResult | None:
    if position is not PositionType.ESELON:
        return None
    if not has_data:
        return LeadershipResult(raw_score=0.0, weighted_score=0.0, applied=False)

    requested = DEFAULT_LEADERSHIP_SCORE if override_score is None else override_score
    raw = clamp_score(requested)
    if raw != requested:
        logger.warning("Leadership override %r clamped to %s", override_score, raw)
    return LeadershipResult(raw_score=raw, weighted_score=raw * LEADERSHIP_WEIGHT, applied=True)


def calculate_total(
    position: PositionType,
    behavior: SectionResult,
    quality: SectionResult,
    leadership: LeadershipResult | None,
) -> float:
    contribution = 0.0
    if position is PositionType.ESELON and leadership is not None:
        contribution = leadership.weighted_score
    return min(behavior.subtotal + quality.subtotal + contribution, TOTAL_CAP)


def performance_rating(total_score: float) -> str:
    if not math.isfinite(total_score):
        total_score = 0.0
    for lower_bound, label in RATING_BANDS:
        if total_score >= lower_bound:
            return label
    return LOWEST_RATING


def score_employee(
    position: PositionType,
    scores: Sequence[CompetencyScore],
    leadership_override: float | None = None,
) -> ReportResult:
    normalized, scale = normalize_scores(scores)
    behavior = calculate_behavior(normalized)
    quality = calculate_quality(normalized, position)
    leadership = compute_leadership(
        position,
        has_performance_data(normalized, behavior, quality),
        leadership_override,
    )
    total = calculate_total(position, behavior, quality, leadership)
    logger.debug(
        "Scored %s: behavior=%.2f quality=%.2f leadership=%s total=%.2f",
        position.value,
        behavior.subtotal,
        quality.subtotal,
        None if leadership is None else round(leadership.weighted_score, 2),
        total,
    )
    return ReportResult(
        position_type=position,
        behavior=behavior,
        quality=quality,
        leadership=leadership,
        total_score=total,
        rating=performance_rating(total),
        normalization_scale=scale,
        competencies=tuple(normalized),
    )


def generate_report(
    profile: EmployeeProfile,
    scores: Sequence[CompetencyScore],
    leadership_override: float | None = None,
) -> ReportResult:
    return score_employee(position_for(profile), scores, leadership_override)
