"""
VDOT Pace Calculator - VDOT Calculator
ジャック・ダニエルズの式によるVDOT算出と、VDOTからのタイム逆算
"""
import enum
import logging
import math
from dataclasses import dataclass

from ..config import (
    SOLVER_DERIVATIVE_STEP,
    SOLVER_FALLBACK_DAMPING,
    SOLVER_MAX_ITERATIONS,
    SOLVER_MIN_DERIVATIVE,
    SOLVER_RECOVERY_MINUTES,
    SOLVER_SEED_FACTOR,
    SOLVER_TOLERANCE,
)
from ..errors import DidNotConvergeError, InvalidInputError
from ..formatting import round_half_up

logger = logging.getLogger(__name__)


def _require_positive(name: str, value: float) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidInputError(f"{name} は数値で指定してください: {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise InvalidInputError(f"{name} は正の値で指定してください: {value}")
    return value


def vo2_cost(velocity: float) -> float:
    """速度（m/分）を維持するための酸素摂取量（ml/kg/分）"""
    return -4.60 + 0.182258 * velocity + 0.000104 * velocity * velocity


def percent_vo2max(duration_minutes: float) -> float:
    """運動時間（分）に対して維持できるVO2maxの割合"""
    return (
        0.8
        + 0.1894393 * math.exp(-0.012778 * duration_minutes)
        + 0.2989558 * math.exp(-0.1932605 * duration_minutes)
    )


def _raw_vdot(distance_meters: float, duration_minutes: float) -> float:
    velocity = distance_meters / duration_minutes
    return vo2_cost(velocity) / percent_vo2max(duration_minutes)


def calculate_vdot_raw(distance_meters: float, duration_minutes: float) -> float:
    """丸める前のVDOTを計算

    Args:
        distance_meters: 距離（m）
        duration_minutes: タイム（分）

    Returns:
        VDOT（丸めなし）

    Raises:
        InvalidInputError: 距離・タイムが正の有限値でない場合
    """
    distance_meters = _require_positive("distance_meters", distance_meters)
    duration_minutes = _require_positive("duration_minutes", duration_minutes)
    return _raw_vdot(distance_meters, duration_minutes)


def calculate_vdot(distance_meters: float, duration_minutes: float) -> float:
    """レース結果からVDOTを計算（小数点1桁、四捨五入）

    Args:
        distance_meters: 距離（m）
        duration_minutes: タイム（分）

    Returns:
        VDOT値

    Raises:
        InvalidInputError: 距離・タイムが正の有限値でない場合
    """
    return round_half_up(calculate_vdot_raw(distance_meters, duration_minutes), 1)


@dataclass(frozen=True)
class Performance:
    """1回のレース（または仮想のレース）結果"""
    distance_meters: float
    duration_minutes: float

    def __post_init__(self):
        _require_positive("distance_meters", self.distance_meters)
        _require_positive("duration_minutes", self.duration_minutes)

    @classmethod
    def from_seconds(cls, distance_meters: float, total_seconds: float) -> "Performance":
        return cls(distance_meters, _require_positive("total_seconds", total_seconds) / 60)

    @property
    def velocity(self) -> float:
        """m/分"""
        return self.distance_meters / self.duration_minutes

    def vdot(self) -> float:
        return calculate_vdot(self.distance_meters, self.duration_minutes)


class SolverState(enum.Enum):
    ITERATING = "iterating"
    CONVERGED = "converged"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class SolveResult:
    """タイム逆算の結果"""
    minutes: float
    state: SolverState
    iterations: int
    residual: float

    @property
    def converged(self) -> bool:
        return self.state is SolverState.CONVERGED


def _next_estimate(distance_meters: float, minutes: float, error: float, current: float) -> float:
    """ニュートン法で次のタイムを求める（傾きが平坦なら乗算で補正）"""
    dt = SOLVER_DERIVATIVE_STEP
    derivative = (_raw_vdot(distance_meters, minutes + dt) - current) / dt

    if abs(derivative) > SOLVER_MIN_DERIVATIVE:
        minutes = minutes - error / derivative
    else:
        minutes = minutes * (1 - error * SOLVER_FALLBACK_DAMPING)

    # 負のタイムに発散した場合は1分から再スタート
    if minutes <= 0:
        minutes = SOLVER_RECOVERY_MINUTES
    return minutes


def solve_time_detailed(distance_meters: float, target_vdot: float) -> SolveResult:
    """VDOTと距離からタイムを逆算し、収束状態も返す

    calculate_vdot_raw(distance, t) = target_vdot となる t を
    前進差分の傾きを使ったニュートン法で探す。最大反復回数に達した場合は
    その時点の推定値を EXHAUSTED として返す。

    Args:
        distance_meters: 距離（m）
        target_vdot: VDOT値

    Returns:
        SolveResult

    Raises:
        InvalidInputError: 距離・VDOTが正の有限値でない場合
    """
    distance_meters = _require_positive("distance_meters", distance_meters)
    target_vdot = _require_positive("target_vdot", target_vdot)

    minutes = distance_meters / (target_vdot * SOLVER_SEED_FACTOR)
    state = SolverState.ITERATING
    iterations = 0
    error = math.inf

    while state is SolverState.ITERATING:
        current = _raw_vdot(distance_meters, minutes)
        error = current - target_vdot

        if abs(error) < SOLVER_TOLERANCE:
            state = SolverState.CONVERGED
        elif iterations >= SOLVER_MAX_ITERATIONS:
            state = SolverState.EXHAUSTED
        else:
            minutes = _next_estimate(distance_meters, minutes, error, current)
            iterations += 1

    result = SolveResult(minutes=minutes, state=state, iterations=iterations, residual=error)
    if result.converged:
        logger.debug("solve_time: %sm VDOT %s -> %.4f分 (%d回)",
                     distance_meters, target_vdot, minutes, iterations)
    else:
        logger.warning("solve_time: %sm VDOT %s は%d回で収束しませんでした (残差 %.4f)",
                       distance_meters, target_vdot, iterations, error)
    return result


def solve_time(distance_meters: float, target_vdot: float, strict: bool = False) -> float:
    """VDOTと距離からタイム（分）を逆算

    Args:
        distance_meters: 距離（m）
        target_vdot: VDOT値
        strict: Trueの場合、収束しなければ DidNotConvergeError を送出

    Returns:
        タイム（分）。strict=False では収束しなくても推定値を返す
    """
    result = solve_time_detailed(distance_meters, target_vdot)
    if strict and not result.converged:
        raise DidNotConvergeError(result)
    return result.minutes
