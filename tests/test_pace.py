"""
VDOT Pace Calculator - Pace Calculator Tests
"""
import os
import sys

import pytest

# srcディレクトリをパスに追加
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from vdot_pace.pace import (
    OPTIONS,
    equal_pace_times,
    get_distance_option,
    pace_per_km_seconds,
    pace_summary,
    split_seconds,
    time_from_pace_per_km,
    time_from_pace_per_mile,
    time_from_slider,
    time_from_speed_kmh,
    time_from_speed_mph,
)


@pytest.fixture
def five_k():
    return get_distance_option("5K")


@pytest.fixture
def ten_k():
    return get_distance_option("10K")


class TestDistanceOptions:
    """距離選択肢のテスト"""

    def test_options(self):
        assert [o.name for o in OPTIONS] == ["5K", "10K", "Half Marathon", "Marathon"]
        assert get_distance_option("Marathon").miles == 26.2188

    def test_unknown(self):
        assert get_distance_option("100km") is None


class TestPaceSummary:
    """pace_summary関数のテスト"""

    def test_5k_20min(self, five_k):
        """5kmを20分"""
        summary = pace_summary(1200, five_k)

        assert summary["pace_per_km"] == "4:00"
        assert summary["pace_per_mile"] == "6:26"
        assert summary["speed_kmh"] == "15.0"
        assert summary["speed_mph"] == "9.3"

    def test_no_time(self, five_k):
        """タイム未入力"""
        assert pace_summary(0, five_k) == {
            "pace_per_km": "0:00",
            "pace_per_mile": "0:00",
            "speed_kmh": "0.0",
            "speed_mph": "0.0",
        }

    def test_no_distance(self):
        assert pace_summary(1200, None)["pace_per_km"] == "0:00"

    def test_pace_per_km_seconds(self, five_k):
        assert pace_per_km_seconds(1200, five_k) == 240
        assert pace_per_km_seconds(0, five_k) == 300


class TestEqualPaceTimes:
    """equal_pace_times関数のテスト"""

    def test_4min_per_km(self, five_k):
        times = {row["name"]: row["time"] for row in equal_pace_times(1200, five_k)}

        assert times == {
            "5K": "20:00",
            "10K": "40:00",
            "Half Marathon": "1:24:23",
            "Marathon": "2:48:46",
        }

    def test_no_time(self, five_k):
        assert all(row["time"] == "0:00" for row in equal_pace_times(0, five_k))


class TestTimeFromInput:
    """ペース・スピード入力からのタイム換算"""

    def test_split_seconds(self):
        assert split_seconds(3725) == (1, 2, 5)
        assert split_seconds(59) == (0, 0, 59)

    def test_from_slider(self, five_k):
        assert time_from_slider(300, five_k) == 1500
        assert time_from_slider(300, None) is None

    def test_from_pace_per_km(self, ten_k):
        assert time_from_pace_per_km("4:00", ten_k) == 2400
        assert time_from_pace_per_km("4.5", ten_k) == 2700

    def test_from_pace_per_mile(self):
        marathon = get_distance_option("Marathon")
        assert time_from_pace_per_mile("8:00", marathon) == 12585

    def test_from_speed(self, ten_k, five_k):
        assert time_from_speed_kmh("12", ten_k) == 3000
        assert time_from_speed_mph("6", five_k) == 1864

    @pytest.mark.parametrize("value", ["", "abc", "0", "-3", None])
    def test_invalid_input(self, ten_k, value):
        assert time_from_pace_per_km(value, ten_k) is None
        assert time_from_pace_per_mile(value, ten_k) is None
        assert time_from_speed_kmh(value, ten_k) is None
        assert time_from_speed_mph(value, ten_k) is None
