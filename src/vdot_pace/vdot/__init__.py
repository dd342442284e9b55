"""
VDOT Pace Calculator - VDOT Package
VDOTの計算とペース管理
"""
from .calculator import (
    Performance,
    SolveResult,
    SolverState,
    calculate_vdot,
    calculate_vdot_raw,
    solve_time,
    solve_time_detailed,
)
from .paces import PaceZone, training_zones
from .projections import (
    STANDARD_DISTANCES,
    RaceDistance,
    RaceProjection,
    projected_times,
    projected_times_frame,
)
