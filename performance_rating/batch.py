from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Mapping

import pandas as pd

from performance_rating.errors import ActionableError
from performance_rating.logging import logger
from performance_rating.models import CompetencyScore, EmployeeProfile, ReportResult
from performance_rating.scoring import generate_report

REQUIRED_SCORE_COLUMNS = ("employee_id", "competency", "raw_value")

SUMMARY_COLUMNS = [
    "employee_id",
    "name",
    "position_type",
    "behavior_subtotal",
    "quality_subtotal",
    "leadership_score",
    "leadership_applied",
    "total_score",
    "rating",
]


@dataclass(frozen=True)
class EmployeeRecord:
    profile: EmployeeProfile
    scores: tuple[CompetencyScore, ...] = field(default_factory=tuple)


def score_employees(
    records: Iterable[EmployeeRecord],
    leadership_overrides: Mapping[str, float] | None = None,
) -> list[tuple[EmployeeProfile, ReportResult]]:
    overrides = leadership_overrides or {}
    results: list[tuple[EmployeeProfile, ReportResult]] = []
    for record in records:
        override = overrides.get(record.profile.employee_id)
        results.append((record.profile, generate_report(record.profile, record.scores, override)))
    logger.info("Scored %d employees (%d leadership overrides)", len(results), len(overrides))
    return results


def _optional_number(value: object) -> float | None:
    if value is None or isinstance(value, str):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _id_key(value: object) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def scores_from_frame(frame: pd.DataFrame) -> dict[str, list[CompetencyScore]]:
    missing = [column for column in REQUIRED_SCORE_COLUMNS if column not in frame.columns]
    if missing:
        raise ActionableError.validation(
            field_name="score frame",
            reason=f"missing columns: {', '.join(missing)}",
            suggestion=f"Provide columns {', '.join(REQUIRED_SCORE_COLUMNS)} (numeric_value optional)",
            context={"columns": [str(c) for c in frame.columns]},
        )

    blank_ids = frame["employee_id"].isna()
    if blank_ids.any():
        raise ActionableError.validation(
            field_name="employee_id",
            reason=f"{int(blank_ids.sum())} score rows have no employee_id",
            suggestion="Drop or fill rows without an employee_id before scoring",
            context={"rows": [str(i) for i in frame.index[blank_ids]]},
        )

    has_numeric = "numeric_value" in frame.columns
    grouped: dict[str, list[CompetencyScore]] = {}
    for employee_id, rows in frame.groupby("employee_id", sort=False):
        grouped[_id_key(employee_id)] = [
            CompetencyScore(
                name=str(row.competency),
                raw_value="" if pd.isna(row.raw_value) else str(row.raw_value),
                numeric_value=_optional_number(row.numeric_value) if has_numeric else None,
            )
            for row in rows.itertuples(index=False)
        ]
    return grouped


def reports_to_frame(reports: Iterable[tuple[EmployeeProfile, ReportResult]]) -> pd.DataFrame:
    rows = [
        {
            "employee_id": profile.employee_id,
            "name": profile.name,
            "position_type": result.position_type.value,
            "behavior_subtotal": round(result.behavior.subtotal, 2),
            "quality_subtotal": round(result.quality.subtotal, 2),
            "leadership_score": round(result.leadership_contribution, 2),
            "leadership_applied": bool(result.leadership and result.leadership.applied),
            "total_score": round(result.total_score, 2),
            "rating": result.rating,
        }
        for profile, result in reports
    ]
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
