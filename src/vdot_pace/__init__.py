"""
VDOT Pace Calculator
ジャック・ダニエルズのVDOT理論に基づくペース・予想タイム計算
"""
from .config import APP_VERSION as __version__
from .errors import DidNotConvergeError, InvalidInputError, VdotPaceError
from .formatting import format_clock, format_pace, parse_clock, parse_pace
from .vdot import (
    calculate_vdot,
    projected_times,
    solve_time,
    training_zones,
)
