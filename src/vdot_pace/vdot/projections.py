"""
VDOT Pace Calculator - Race Projections
VDOTから各距離の予想タイムを算出
"""
from dataclasses import asdict, dataclass
from typing import Iterable, List

import pandas as pd

from ..config import RACE_DISTANCES
from ..errors import InvalidInputError
from ..formatting import format_clock, round_half_up
from .calculator import solve_time


@dataclass(frozen=True)
class RaceDistance:
    name: str
    km: float
    meters: float

    def __post_init__(self):
        if not self.meters > 0:
            raise InvalidInputError(f"距離は正の値で指定してください: {self.name} {self.meters}")


@dataclass(frozen=True)
class RaceProjection:
    """1距離分の予想タイム"""
    name: str
    km: float
    meters: float
    minutes: float
    seconds: int

    @property
    def display(self) -> str:
        return format_clock(self.seconds)


STANDARD_DISTANCES = tuple(RaceDistance(*row) for row in RACE_DISTANCES)


def projected_times(vdot: float, distances: Iterable[RaceDistance] = STANDARD_DISTANCES) -> List[RaceProjection]:
    """VDOTから各距離の予想タイムを計算

    Args:
        vdot: VDOT値
        distances: 対象の距離（デフォルトは1500m〜フルマラソンの9距離）

    Returns:
        RaceProjection のリスト（distances の順）
    """
    projections = []
    for distance in distances:
        minutes = solve_time(distance.meters, vdot)
        projections.append(RaceProjection(
            name=distance.name,
            km=distance.km,
            meters=distance.meters,
            minutes=minutes,
            seconds=int(round_half_up(minutes * 60)),
        ))
    return projections


def projected_times_frame(vdot: float) -> pd.DataFrame:
    """予想タイムを表示用のデータフレームに変換"""
    projections = projected_times(vdot)
    df = pd.DataFrame([asdict(p) for p in projections])
    df["time"] = [p.display for p in projections]
    df["pace_per_km"] = df["seconds"] / df["km"]
    return df
