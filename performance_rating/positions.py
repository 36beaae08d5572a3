from __future__ import annotations

from performance_rating.logging import logger
from performance_rating.models import EmployeeProfile, PositionType
from performance_rating.text import contains_any, normalize_text

STAFF_KEYWORDS: tuple[str, ...] = ("staff", "staf")
ESELON_KEYWORDS: tuple[str, ...] = (
    "eselon",
    "kepala",
    "sekretaris",
    "kabid",
    "kabag",
    "kasubag",
    "kepala seksi",
    "kasi",
    "koordinator",
    "pengawas",
    "sub bagian",
    "subbagian",
    "subbidang",
    "sub bidang",
)
ESELON_GRADE_PREFIX = "IV"


def classify_position(
    jabatan: str | None,
    sub_jabatan: str | None = None,
    gol: str | None = None,
) -> PositionType:
    combined = normalize_text(f"{jabatan or ''} {sub_jabatan or ''}")
    if combined:
        if contains_any(combined, STAFF_KEYWORDS):
            return PositionType.STAFF
        if contains_any(combined, ESELON_KEYWORDS):
            return PositionType.ESELON

    grade = (gol or "").strip().upper()
    position = PositionType.ESELON if grade.startswith(ESELON_GRADE_PREFIX) else PositionType.STAFF
    logger.debug("No role keyword in %r; grade %r gives %s", combined, grade, position.value)
    return position


def position_for(profile: EmployeeProfile) -> PositionType:
    return classify_position(profile.jabatan, profile.sub_jabatan, profile.gol)
