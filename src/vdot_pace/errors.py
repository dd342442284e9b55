"""
VDOT Pace Calculator - Errors
計算エラーの定義
"""


class VdotPaceError(Exception):
    """このパッケージが送出する例外の基底クラス"""


class InvalidInputError(VdotPaceError, ValueError):
    """距離・タイム・VDOTが正の有限値でない"""


class DidNotConvergeError(VdotPaceError, ArithmeticError):
    """ソルバーが最大反復回数内に収束しなかった（strictモードのみ）"""

    def __init__(self, result):
        self.result = result
        super().__init__(
            f"{result.iterations}回の反復で収束しませんでした "
            f"(推定タイム {result.minutes:.3f}分, 残差 {result.residual:.4f})"
        )
