from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType

from performance_rating.models import PositionType
from performance_rating.text import normalize_text


@dataclass(frozen=True)
class WeightedParameter:
    name: str
    weight: float
    aliases: tuple[str, ...]
    targets: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "targets", _targets(self.name, self.aliases))

    def weight_for(self, position: PositionType) -> float:
        return self.weight


@dataclass(frozen=True)
class DualWeightedParameter:
    name: str
    eselon_weight: float
    staff_weight: float
    aliases: tuple[str, ...]
    targets: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "targets", _targets(self.name, self.aliases))

    def weight_for(self, position: PositionType) -> float:
        if position is PositionType.ESELON:
            return self.eselon_weight
        return self.staff_weight


RubricParameter = WeightedParameter | DualWeightedParameter


def _targets(name: str, aliases: tuple[str, ...]) -> tuple[str, ...]:
    folded = (normalize_text(token) for token in (name, *aliases))
    return tuple(token for token in folded if token)


BEHAVIOR_PARAMETERS: tuple[WeightedParameter, ...] = (
    WeightedParameter(
        "Inisiatif dan fleksibilitas",
        5.0,
        ("inisiatif", "initiative", "fleksibilitas", "flexibility"),
    ),
    WeightedParameter(
        "Kehadiran dan ketepatan waktu",
        5.0,
        ("kehadiran", "ketepatan waktu", "attendance", "punctuality", "absensi"),
    ),
    WeightedParameter(
        "Kerjasama dan team work",
        5.0,
        ("kerjasama", "team work", "teamwork", "kolaborasi", "team"),
    ),
    WeightedParameter(
        "Manajemen waktu kerja",
        5.0,
        ("manajemen waktu", "time management"),
    ),
    WeightedParameter(
        "Kepemimpinan",
        10.0,
        ("kepemimpinan", "leadership", "leader"),
    ),
)

QUALITY_PARAMETERS: tuple[DualWeightedParameter, ...] = (
    DualWeightedParameter(
        "Kualitas kinerja",
        25.5,
        42.5,
        ("kualitas kinerja", "kinerja", "quality of work", "quality"),
    ),
    DualWeightedParameter(
        "Kemampuan berkomunikasi",
        8.5,
        8.5,
        ("komunikasi", "communication"),
    ),
    DualWeightedParameter(
        "Pemahaman tentang permasalahan sosial",
        8.5,
        8.5,
        ("permasalahan sosial", "social issues", "social problem", "pemahaman sosial"),
    ),
)

BEHAVIOR_CAP = 25.5
QUALITY_CAPS = MappingProxyType(
    {
        PositionType.ESELON: 42.5,
        PositionType.STAFF: 70.0,
    }
)
LEADERSHIP_CAP = 17.0
LEADERSHIP_WEIGHT = 0.17
DEFAULT_LEADERSHIP_SCORE = 80.0
TOTAL_CAP = 85.0

# Inclusive lower bounds, highest first.
RATING_BANDS: tuple[tuple[float, str], ...] = (
    (80.0, "Sangat Baik"),
    (70.0, "Baik"),
    (60.0, "Kurang Baik"),
)
LOWEST_RATING = "Perlu Pembinaan"

SECTION_TITLES = MappingProxyType(
    {
        "behavior": "Perilaku Kerja (30%)",
        "quality": "Kualitas Kerja",
        "leadership": "Penilaian Pimpinan",
    }
)
