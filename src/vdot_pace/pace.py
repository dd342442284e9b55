"""
VDOT Pace Calculator - Pace Calculator
一定ペースでのペース・スピード・タイム換算
"""
import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .config import DEFAULT_PACE_SECONDS, DISTANCE_OPTIONS, KM_PER_MILE
from .formatting import format_clock, format_pace, parse_pace, round_half_up


@dataclass(frozen=True)
class DistanceOption:
    name: str
    km: float
    miles: float


OPTIONS = tuple(DistanceOption(*row) for row in DISTANCE_OPTIONS)


def get_distance_option(name: str) -> Optional[DistanceOption]:
    """距離名から DistanceOption を取得（見つからない場合はNone）"""
    for option in OPTIONS:
        if option.name == name:
            return option
    return None


def split_seconds(total_seconds: int) -> Tuple[int, int, int]:
    """秒を (時, 分, 秒) に分解"""
    total_seconds = int(total_seconds)
    return total_seconds // 3600, (total_seconds % 3600) // 60, total_seconds % 60


def pace_per_km_seconds(total_seconds: float, distance: DistanceOption) -> float:
    """1kmあたりの秒数（タイム未入力時は5:00/km）"""
    if total_seconds <= 0 or distance is None:
        return DEFAULT_PACE_SECONDS
    return total_seconds / distance.km


def pace_summary(total_seconds: float, distance: DistanceOption) -> dict:
    """タイムと距離からペースとスピードを算出

    Returns:
        dict: {
            "pace_per_km": "M:SS",
            "pace_per_mile": "M:SS",
            "speed_kmh": "0.0",
            "speed_mph": "0.0"
        }
    """
    if total_seconds <= 0 or distance is None:
        return {
            "pace_per_km": "0:00",
            "pace_per_mile": "0:00",
            "speed_kmh": "0.0",
            "speed_mph": "0.0",
        }

    seconds_per_km = total_seconds / distance.km
    seconds_per_mile = total_seconds / distance.miles
    speed_kmh = 3600 / seconds_per_km
    speed_mph = speed_kmh / KM_PER_MILE

    return {
        "pace_per_km": format_pace(seconds_per_km),
        "pace_per_mile": format_pace(seconds_per_mile),
        "speed_kmh": f"{speed_kmh:.1f}",
        "speed_mph": f"{speed_mph:.1f}",
    }


def equal_pace_times(total_seconds: float, distance: DistanceOption) -> List[dict]:
    """同じペースで各距離を走った場合のタイム

    VDOTによる予想タイムとは異なり、距離が伸びてもペースは落ちない前提。
    """
    if total_seconds <= 0 or distance is None:
        return [{"name": o.name, "km": o.km, "time": "0:00"} for o in OPTIONS]

    seconds_per_km = total_seconds / distance.km
    return [
        {"name": o.name, "km": o.km, "time": format_clock(seconds_per_km * o.km)}
        for o in OPTIONS
    ]


def _total_from_unit_pace(seconds_per_unit: Optional[float], units: float) -> Optional[int]:
    if seconds_per_unit is None or seconds_per_unit <= 0:
        return None
    return int(round_half_up(seconds_per_unit * units))


def time_from_slider(seconds_per_km: float, distance: DistanceOption) -> Optional[int]:
    """ペーススライダーの値（秒/km）からタイム（秒）を算出"""
    if distance is None:
        return None
    return _total_from_unit_pace(seconds_per_km, distance.km)


def time_from_pace_per_km(pace_str: str, distance: DistanceOption) -> Optional[int]:
    """km ペース文字列（"4:30" / "4.5"）からタイム（秒）を算出"""
    if distance is None:
        return None
    return _total_from_unit_pace(parse_pace(pace_str), distance.km)


def time_from_pace_per_mile(pace_str: str, distance: DistanceOption) -> Optional[int]:
    """マイルペース文字列からタイム（秒）を算出"""
    if distance is None:
        return None
    return _total_from_unit_pace(parse_pace(pace_str), distance.miles)


def _parse_speed(speed_str: str) -> Optional[float]:
    try:
        speed = float(str(speed_str).strip())
    except ValueError:
        return None
    if not math.isfinite(speed) or speed <= 0:
        return None
    return speed


def time_from_speed_kmh(speed_str: str, distance: DistanceOption) -> Optional[int]:
    """時速（km/h）からタイム（秒）を算出"""
    speed = _parse_speed(speed_str)
    if speed is None or distance is None:
        return None
    return int(round_half_up(distance.km / speed * 3600))


def time_from_speed_mph(speed_str: str, distance: DistanceOption) -> Optional[int]:
    """時速（mph）からタイム（秒）を算出"""
    speed = _parse_speed(speed_str)
    if speed is None or distance is None:
        return None
    return int(round_half_up(distance.miles / speed * 3600))
