"""
VDOT Pace Calculator - VDOT Calculator Tests
"""
import logging
import math
import os
import sys

import pytest

# srcディレクトリをパスに追加
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from vdot_pace.errors import DidNotConvergeError, InvalidInputError
from vdot_pace.vdot import calculator
from vdot_pace.vdot.calculator import (
    Performance,
    SolverState,
    calculate_vdot,
    calculate_vdot_raw,
    percent_vo2max,
    solve_time,
    solve_time_detailed,
    vo2_cost,
)
from vdot_pace.vdot.projections import STANDARD_DISTANCES


class TestCalculateVdot:
    """calculate_vdot関数のテスト"""

    def test_5k_20min(self):
        """5000mを20分（250m/分）"""
        assert calculate_vdot_raw(5000, 20.0) == pytest.approx(49.806, abs=0.005)
        assert calculate_vdot(5000, 20.0) == 49.8

    def test_10k_40min(self):
        """同じ速度でも長時間ほどVDOTは高い"""
        assert calculate_vdot(10000, 40.0) == 51.9
        assert calculate_vdot(10000, 40.0) > calculate_vdot(5000, 20.0)

    def test_formula_parts(self):
        """酸素摂取量と%VO2maxの式"""
        assert vo2_cost(250) == pytest.approx(47.4645)
        assert percent_vo2max(0) == pytest.approx(0.8 + 0.1894393 + 0.2989558)
        assert calculate_vdot_raw(5000, 20.0) == pytest.approx(vo2_cost(250) / percent_vo2max(20.0))

    def test_rounds_to_one_decimal(self):
        """小数点1桁に丸める"""
        raw = calculate_vdot_raw(42195, 189.5)
        assert calculate_vdot(42195, 189.5) == pytest.approx(math.floor(raw * 10 + 0.5) / 10)

    @pytest.mark.parametrize("distance,minutes", [
        (0, 20),
        (-5000, 20),
        (5000, 0),
        (5000, -1),
        (float("nan"), 20),
        (5000, float("inf")),
        ("abc", 20),
        (None, 20),
    ])
    def test_invalid_input(self, distance, minutes):
        """正の有限値以外は InvalidInputError"""
        with pytest.raises(InvalidInputError):
            calculate_vdot(distance, minutes)

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            calculate_vdot(0, 20)

    @pytest.mark.parametrize("distance", [1500, 5000, 10000, 21097.5, 42195])
    def test_monotonic_in_duration(self, distance):
        """現実的なペース範囲では、タイムが長いほどVDOTは低い"""
        scores = []
        for minutes in range(3, 301):
            velocity = distance / minutes
            if 80 <= velocity <= 420:
                scores.append(calculate_vdot_raw(distance, minutes))

        assert len(scores) > 1
        assert all(a > b for a, b in zip(scores, scores[1:]))


class TestPerformance:
    """Performanceのテスト"""

    def test_vdot(self):
        performance = Performance(5000, 20.0)
        assert performance.vdot() == 49.8
        assert performance.velocity == 250

    def test_from_seconds(self):
        assert Performance.from_seconds(5000, 1200) == Performance(5000, 20.0)

    def test_invalid(self):
        with pytest.raises(InvalidInputError):
            Performance(0, 20)
        with pytest.raises(InvalidInputError):
            Performance.from_seconds(5000, 0)


class TestSolveTime:
    """solve_time関数のテスト"""

    def test_inverse_of_forward_formula(self):
        """5000m 20分のVDOTから20分を逆算できる"""
        target = calculate_vdot_raw(5000, 20.0)
        assert solve_time(5000, target) == pytest.approx(20.0, abs=0.01)

    def test_marathon_projection(self):
        """VDOT 50.4 のフルマラソンは3時間10分前後"""
        minutes = solve_time(42195, 50.4)
        assert 185 < minutes < 195

    @pytest.mark.parametrize("vdot", [30, 40, 50, 60, 75])
    def test_round_trip(self, vdot):
        """各距離で逆算したタイムからVDOTを再計算すると元の値に戻る"""
        for distance in STANDARD_DISTANCES:
            result = solve_time_detailed(distance.meters, vdot)
            assert result.converged, distance.name
            assert abs(result.residual) < 0.001
            assert abs(calculate_vdot(distance.meters, result.minutes) - vdot) <= 0.1 + 1e-9

    def test_detailed_result(self):
        result = solve_time_detailed(10000, 45)
        assert result.state is SolverState.CONVERGED
        assert 0 < result.iterations <= 50
        assert result.minutes == solve_time(10000, 45)

    def test_faster_for_higher_vdot(self):
        assert solve_time(10000, 60) < solve_time(10000, 50) < solve_time(10000, 40)

    @pytest.mark.parametrize("distance,vdot", [
        (0, 50),
        (-1000, 50),
        (5000, 0),
        (5000, -10),
        (5000, float("nan")),
        (float("inf"), 50),
    ])
    def test_invalid_input(self, distance, vdot):
        with pytest.raises(InvalidInputError):
            solve_time(distance, vdot)


class TestSolverFallback:
    """傾きが平坦な場合の補正と、収束しない場合の挙動"""

    @pytest.fixture
    def flat_derivative(self, monkeypatch):
        """常にニュートン法を使わず乗算補正を使わせる"""
        monkeypatch.setattr(calculator, "SOLVER_MIN_DERIVATIVE", math.inf)

    def test_recovery_floor(self, flat_derivative, monkeypatch):
        """負のタイムに発散した場合は1分にリセットされる"""
        monkeypatch.setattr(calculator, "SOLVER_FALLBACK_DAMPING", 1.0)

        result = solve_time_detailed(42195, 50)

        assert result.state is SolverState.EXHAUSTED
        assert result.iterations == 50
        assert result.minutes == 1.0
        assert not result.converged

    def test_returns_estimate_without_raising(self, flat_derivative, caplog):
        """デフォルトでは収束しなくても推定値を返し、警告を記録する"""
        with caplog.at_level(logging.WARNING, logger="vdot_pace.vdot.calculator"):
            minutes = solve_time(1000, 50)

        assert minutes > 0
        assert "収束しませんでした" in caplog.text

    def test_strict_raises(self, flat_derivative):
        """strict=True では DidNotConvergeError"""
        with pytest.raises(DidNotConvergeError) as exc_info:
            solve_time(1000, 50, strict=True)

        assert exc_info.value.result.state is SolverState.EXHAUSTED
        assert exc_info.value.result.minutes > 0

    def test_strict_converged(self):
        assert solve_time(5000, 50, strict=True) == solve_time(5000, 50)
