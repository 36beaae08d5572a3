from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from performance_rating.models import (
    CompetencyScore,
    EmployeeProfile,
    ReportResult,
    ScoreComponent,
)
from performance_rating.rubric import LEADERSHIP_CAP, LEADERSHIP_WEIGHT, SECTION_TITLES
from performance_rating.scoring import generate_report

SUMMARY_SIZE = 3


@dataclass(frozen=True)
class ReportSection:
    title: str
    cap: float
    subtotal: float
    components: tuple[ScoreComponent, ...]


@dataclass(frozen=True)
class PerformanceSummary:
    average_score: float
    strengths: list[str]
    gaps: list[str]


@dataclass(frozen=True)
class ReportContext:
    profile: EmployeeProfile
    result: ReportResult
    sections: list[ReportSection]
    competencies: list[CompetencyScore]
    summary: PerformanceSummary


def build_sections(result: ReportResult) -> list[ReportSection]:
    sections = [
        ReportSection(
            title=SECTION_TITLES["behavior"],
            cap=result.behavior.cap,
            subtotal=result.behavior.subtotal,
            components=result.behavior.components,
        ),
        ReportSection(
            title=SECTION_TITLES["quality"],
            cap=result.quality.cap,
            subtotal=result.quality.subtotal,
            components=result.quality.components,
        ),
    ]
    leader = result.leadership
    if leader is not None:
        sections.append(
            ReportSection(
                title=SECTION_TITLES["leadership"],
                cap=LEADERSHIP_CAP,
                subtotal=leader.weighted_score,
                components=(
                    ScoreComponent(
                        parameter="Nilai Pimpinan" if leader.applied else "Tidak diaplikasikan",
                        raw_score=leader.raw_score,
                        weight_percentage=LEADERSHIP_WEIGHT * 100.0,
                        weighted_score=leader.weighted_score,
                    ),
                ),
            )
        )
    return sections


def rank_competencies(scores: Sequence[CompetencyScore]) -> list[CompetencyScore]:
    return sorted(scores, key=lambda s: s.normalized, reverse=True)


def summarize_performance(scores: Sequence[CompetencyScore]) -> PerformanceSummary:
    rated = [s for s in scores if s.numeric_value is not None and math.isfinite(s.numeric_value)]
    if not rated:
        return PerformanceSummary(average_score=0.0, strengths=[], gaps=[])
    average = sum(s.numeric_value for s in rated) / len(rated)
    highest = sorted(rated, key=lambda s: s.numeric_value, reverse=True)
    lowest = sorted(rated, key=lambda s: s.numeric_value)
    return PerformanceSummary(
        average_score=average,
        strengths=[s.name for s in highest[:SUMMARY_SIZE]],
        gaps=[s.name for s in lowest[:SUMMARY_SIZE]],
    )


def format_score(value: float) -> str:
    """Two decimals with a decimal comma, as printed on reports (``68,60``)."""
    return f"{value:.2f}".replace(".", ",")


def build_report_context(
    profile: EmployeeProfile,
    scores: Sequence[CompetencyScore],
    leadership_override: float | None = None,
) -> ReportContext:
    result = generate_report(profile, scores, leadership_override)
    return ReportContext(
        profile=profile,
        result=result,
        sections=build_sections(result),
        competencies=rank_competencies(result.competencies),
        summary=summarize_performance(result.competencies),
    )
