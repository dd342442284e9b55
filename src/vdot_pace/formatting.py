"""
VDOT Pace Calculator - Formatting
タイム・ペースの文字列変換
"""
import math
from typing import Optional

import pandas as pd


def round_half_up(value: float, digits: int = 0) -> float:
    """四捨五入（0から遠い方へ丸める）

    Pythonの round() は偶数丸めのため、VDOTや秒数の表示には使わない。

    Args:
        value: 丸める値
        digits: 小数点以下の桁数

    Returns:
        丸めた値（digits=0 の場合も float）
    """
    factor = 10 ** digits
    return math.copysign(math.floor(abs(value) * factor + 0.5) / factor, value)


def _is_missing(value) -> bool:
    return value is None or not math.isfinite(value)


def format_clock(total_seconds: float) -> str:
    """秒をタイム文字列に変換

    Args:
        total_seconds: 秒数

    Returns:
        1時間以上は "H:MM:SS"、それ未満は "M:SS"。
        0以下・None・非有限値は "0:00"
    """
    if _is_missing(total_seconds) or total_seconds <= 0:
        return "0:00"

    hours = int(total_seconds // 3600)
    minutes = int((total_seconds % 3600) // 60)
    secs = int(total_seconds % 60)

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_pace(seconds_per_unit: float) -> str:
    """ペース（秒/km、秒/マイル）を "M:SS" に変換

    60分を超えるペースでも時間表記にはしない。
    """
    if _is_missing(seconds_per_unit) or seconds_per_unit <= 0:
        return "0:00"

    minutes = int(seconds_per_unit // 60)
    secs = int(seconds_per_unit % 60)
    return f"{minutes}:{secs:02d}"


def parse_clock(time_str: str) -> Optional[int]:
    """時間文字列を秒に変換

    Args:
        time_str: 時間文字列 (例: "3:30:00", "25:00", "330")

    Returns:
        秒数（変換できない場合はNone）
    """
    if not time_str or pd.isna(time_str):
        return None

    time_str = str(time_str).strip()

    try:
        parts = [int(p) for p in time_str.replace("：", ":").split(":")]
    except ValueError:
        return None

    if any(p < 0 for p in parts):
        return None

    if len(parts) == 3:
        # H:MM:SS
        return parts[0] * 3600 + parts[1] * 60 + parts[2]
    elif len(parts) == 2:
        # M:SS or MM:SS
        return parts[0] * 60 + parts[1]
    elif len(parts) == 1:
        return parts[0]
    return None


def parse_pace(pace_str: str) -> Optional[int]:
    """ペース文字列を秒に変換

    "4:30" のようなコロン区切りと、"4.5"（= 4:30）のような分の小数表記に対応。

    Args:
        pace_str: ペース文字列

    Returns:
        秒数（変換できない場合はNone）
    """
    if not pace_str or pd.isna(pace_str):
        return None

    pace_str = str(pace_str).strip().replace("：", ":")
    if not pace_str:
        return None

    if ":" in pace_str:
        parts = pace_str.split(":")
        if len(parts) != 2:
            return None
        try:
            minutes = int(parts[0]) if parts[0] else 0
            secs = int(parts[1]) if parts[1] else 0
        except ValueError:
            return None
        if minutes < 0 or secs < 0:
            return None
        return minutes * 60 + secs

    try:
        decimal = float(pace_str)
    except ValueError:
        return None

    if not math.isfinite(decimal) or decimal <= 0:
        return None

    minutes = math.floor(decimal)
    secs = int(round_half_up((decimal - minutes) * 60))
    return minutes * 60 + secs
