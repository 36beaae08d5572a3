from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class PositionType(StrEnum):
    ESELON = "Eselon"
    STAFF = "Staff"


@dataclass(frozen=True)
class CompetencyScore:
    name: str
    raw_value: str = ""
    numeric_value: float | None = None
    source_value: float = 0.0
    normalized: float = 0.0


@dataclass(frozen=True)
class EmployeeProfile:
    employee_id: str
    name: str
    nip: str | None = None
    gol: str | None = None
    jabatan: str | None = None
    sub_jabatan: str | None = None


@dataclass(frozen=True)
class ScoreComponent:
    parameter: str
    raw_score: float
    weight_percentage: float
    weighted_score: float
    matched_competency: str | None = None


@dataclass(frozen=True)
class SectionResult:
    components: tuple[ScoreComponent, ...]
    cap: float
    subtotal: float


@dataclass(frozen=True)
class LeadershipResult:
    raw_score: float
    weighted_score: float
    applied: bool


@dataclass(frozen=True)
class ReportResult:
    position_type: PositionType
    behavior: SectionResult
    quality: SectionResult
    leadership: LeadershipResult | None
    total_score: float
    rating: str
    normalization_scale: float = 100.0
    competencies: tuple[CompetencyScore, ...] = field(default_factory=tuple)

    @property
    def leadership_contribution(self) -> float:
        if self.position_type is not PositionType.ESELON or self.leadership is None:
            return 0.0
        return self.leadership.weighted_score
