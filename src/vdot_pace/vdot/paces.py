"""
VDOT Pace Calculator - Training Paces
VDOTからトレーニングゾーンのペースを計算
"""
from dataclasses import dataclass
from typing import Dict, Optional

from ..config import TRAINING_ZONE_SETTINGS, ZONE_REFERENCE_METERS
from ..formatting import format_pace, round_half_up
from .calculator import solve_time


@dataclass(frozen=True)
class PaceZone:
    """トレーニングゾーン（秒/km）

    幅のあるゾーンは min_sec_per_km（遅い側）と max_sec_per_km（速い側）を、
    単一ペースのゾーンは sec_per_km を持つ。
    """
    key: str
    name: str
    description: str
    sec_per_km: Optional[int] = None
    min_sec_per_km: Optional[int] = None
    max_sec_per_km: Optional[int] = None

    @property
    def is_band(self) -> bool:
        return self.sec_per_km is None

    @property
    def mid_sec_per_km(self) -> float:
        if self.is_band:
            return (self.min_sec_per_km + self.max_sec_per_km) / 2
        return self.sec_per_km

    @property
    def display(self) -> str:
        if self.is_band:
            return f"{format_pace(self.min_sec_per_km)}〜{format_pace(self.max_sec_per_km)}"
        return format_pace(self.sec_per_km)


def _pace_seconds(minutes: float, multiplier: float = 1.0) -> int:
    return int(round_half_up(minutes * 60 * multiplier))


def training_zones(vdot: float) -> Dict[str, PaceZone]:
    """VDOTから5つのトレーニングゾーンを算出

    各ゾーンは 1km を (VDOT + オフセット) で走った場合のタイムを基準にし、
    ゾーンごとの倍率で幅を付ける。

    Args:
        vdot: VDOT値

    Returns:
        dict: {"easy", "marathon", "threshold", "interval", "repetition": PaceZone}
    """
    zones = {}
    for key, (name, offset, slow, fast, description) in TRAINING_ZONE_SETTINGS.items():
        minutes = solve_time(ZONE_REFERENCE_METERS, vdot + offset)

        if slow is None:
            zones[key] = PaceZone(key, name, description, sec_per_km=_pace_seconds(minutes))
        else:
            zones[key] = PaceZone(
                key, name, description,
                min_sec_per_km=_pace_seconds(minutes, slow),
                max_sec_per_km=_pace_seconds(minutes, fast),
            )
    return zones
