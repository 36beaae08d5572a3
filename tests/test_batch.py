from __future__ import annotations

import pandas as pd
import pytest

from performance_rating.batch import (
    SUMMARY_COLUMNS,
    EmployeeRecord,
    reports_to_frame,
    score_employees,
    scores_from_frame,
)
from performance_rating.errors import ActionableError, ErrorType
from performance_rating.models import EmployeeProfile, PositionType


def _frame() -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"employee_id": 1, "competency": "Kualitas Kinerja", "raw_value": "3,5", "numeric_value": 3.5},
            {"employee_id": 2, "competency": "Komunikasi", "raw_value": "80", "numeric_value": 80.0},
            {"employee_id": 1, "competency": "Kerjasama", "raw_value": "4", "numeric_value": float("nan")},
            {"employee_id": 2, "competency": "Kepemimpinan", "raw_value": None, "numeric_value": None},
        ]
    )


def _records(grouped) -> list[EmployeeRecord]:
    profiles = {
        "1": EmployeeProfile(employee_id="1", name="Andi", gol="IV/a", jabatan="Kepala Seksi"),
        "2": EmployeeProfile(employee_id="2", name="Rina", gol="III/a", jabatan="Staf Pelaksana"),
    }
    return [EmployeeRecord(profile=profiles[key], scores=tuple(grouped[key])) for key in ("1", "2")]


def test_scores_from_frame_groups_and_keeps_row_order():
    grouped = scores_from_frame(_frame())
    assert list(grouped) == ["1", "2"]
    assert [s.name for s in grouped["1"]] == ["Kualitas Kinerja", "Kerjasama"]
    assert grouped["1"][0].numeric_value == 3.5
    assert grouped["1"][1].numeric_value is None
    assert grouped["2"][1].raw_value == ""


def test_scores_from_frame_without_numeric_column():
    grouped = scores_from_frame(_frame().drop(columns=["numeric_value"]))
    assert all(s.numeric_value is None for scores in grouped.values() for s in scores)


def test_scores_from_frame_rejects_missing_columns():
    with pytest.raises(ActionableError) as excinfo:
        scores_from_frame(pd.DataFrame({"employee_id": [1], "value": [3]}))
    assert excinfo.value.error_type is ErrorType.VALIDATION
    assert "competency" in excinfo.value.error
    assert "raw_value" in excinfo.value.error


def test_score_employees_applies_overrides_by_id():
    records = _records(scores_from_frame(_frame()))
    reports = score_employees(records, leadership_overrides={"1": 100.0})
    first = reports[0][1]
    second = reports[1][1]
    assert first.position_type is PositionType.ESELON
    assert first.leadership.raw_score == 100.0
    assert second.position_type is PositionType.STAFF
    assert second.leadership is None


def test_reports_to_frame_one_row_per_employee():
    reports = score_employees(_records(scores_from_frame(_frame())))
    frame = reports_to_frame(reports)
    assert list(frame.columns) == SUMMARY_COLUMNS
    assert len(frame) == 2
    andi = frame.iloc[0]
    assert andi["position_type"] == "Eselon"
    assert bool(andi["leadership_applied"]) is True
    assert andi["leadership_score"] == 13.6
    # 4-point sheet: 3.5 -> 87.5 on quality (25.5%), 4 -> 100 on teamwork (5%)
    assert andi["total_score"] == pytest.approx(40.91, abs=0.01)
    rina = frame.iloc[1]
    assert rina["leadership_score"] == 0.0
    assert bool(rina["leadership_applied"]) is False


def test_reports_to_frame_empty():
    frame = reports_to_frame([])
    assert frame.empty
    assert list(frame.columns) == SUMMARY_COLUMNS


def test_scores_from_frame_rejects_rows_without_employee_id():
    frame = _frame().assign(employee_id=[1, 2, 1, None])
    with pytest.raises(ActionableError) as excinfo:
        scores_from_frame(frame)
    assert excinfo.value.error_type is ErrorType.VALIDATION
    assert "employee_id" in excinfo.value.error
    assert excinfo.value.context == {"rows": ["3"]}


def test_float_ids_keep_override_lookup_working():
    frame = _frame()
    frame["employee_id"] = frame["employee_id"].astype(float)
    grouped = scores_from_frame(frame)
    assert list(grouped) == ["1", "2"]
    reports = score_employees(_records(grouped), leadership_overrides={"1": 90.0})
    assert reports[0][1].leadership.raw_score == 90.0
