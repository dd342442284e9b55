"""
VDOT Pace Calculator - Configuration
アプリケーション全体の設定値を管理
"""

# =============================================
# アプリ情報
# =============================================
APP_NAME = "VDOTペース計算機"
APP_VERSION = "1.0.0"

# ログレベル（app.py から logging.basicConfig に渡す）
LOG_LEVEL = "INFO"

# =============================================
# ソルバー設定（VDOT → タイムの逆算）
# =============================================
SOLVER_MAX_ITERATIONS = 50
SOLVER_TOLERANCE = 0.001          # 生VDOTの許容誤差
SOLVER_DERIVATIVE_STEP = 0.01     # 前進差分の刻み幅（分）
SOLVER_MIN_DERIVATIVE = 0.0001    # これ以下の傾きではニュートン法を使わない
SOLVER_FALLBACK_DAMPING = 0.01    # 傾きが平坦な場合の乗算補正係数
SOLVER_RECOVERY_MINUTES = 1.0     # 負のタイムになった場合のリセット値（分）
SOLVER_SEED_FACTOR = 20           # 初期値: 距離 / (VDOT × 20)

# =============================================
# 標準レース距離
# =============================================
# (名前, km, m)
RACE_DISTANCES = (
    ("1500m", 1.5, 1500),
    ("Mile", 1.60934, 1609.34),
    ("3K", 3, 3000),
    ("5K", 5, 5000),
    ("8K", 8, 8000),
    ("10K", 10, 10000),
    ("15K", 15, 15000),
    ("Half Marathon", 21.0975, 21097.5),
    ("Marathon", 42.195, 42195),
)

# =============================================
# トレーニングゾーン設定
# =============================================
# ゾーンのペースは 1km を (VDOT + offset) で走った場合のタイムから算出する
ZONE_REFERENCE_METERS = 1000

# key: (表示名, VDOTオフセット, 遅い側の倍率, 速い側の倍率, 説明)
# 倍率が None のゾーンは幅を持たない単一ペース
TRAINING_ZONE_SETTINGS = {
    "easy": ("Easy", -8, 1.15, 0.95, "Recovery and easy aerobic runs"),
    "marathon": ("Marathon Pace", -2, None, None, "Goal marathon race pace"),
    "threshold": ("Threshold", 0.5, 1.03, 0.97, "Comfortably hard tempo runs"),
    "interval": ("Interval", 4, 1.02, 0.98, "VO2 max intervals"),
    "repetition": ("Repetition", 7, None, None, "Fast, short repetitions"),
}

# =============================================
# ペース計算機設定
# =============================================
KM_PER_MILE = 1.60934

# (名前, km, マイル)
DISTANCE_OPTIONS = (
    ("5K", 5, 3.10686),
    ("10K", 10, 6.21371),
    ("Half Marathon", 21.0975, 13.1094),
    ("Marathon", 42.195, 26.2188),
)

DEFAULT_DISTANCE = "5K"
DEFAULT_TIME = "20:00"

# タイム未入力時のペース（5:00/km）
DEFAULT_PACE_SECONDS = 300

# ペーススライダーの範囲（秒/km）
PACE_SLIDER_MIN = 150
PACE_SLIDER_MAX = 600
