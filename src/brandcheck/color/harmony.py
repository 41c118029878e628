"""ブランドカラー間の色相関係に基づく調和スコア。

色相差のみを見るヒューリスティックであり、知覚的な正確性は保証しない。
閾値は既存の採点結果との互換性のため固定値としている。
"""

import math
from itertools import combinations
from typing import Literal

HarmonyKind = Literal["complementary", "triadic", "analogous", "none"]

# 補色: 180度から30度以内
_COMPLEMENTARY_TOLERANCE = 30.0
# トライアド: 120度から20度以内（2組以上）
_TRIADIC_TOLERANCE = 20.0
# 類似色: すべての色相差が60度未満
_ANALOGOUS_LIMIT = 60.0

_SCHEME_SCORE = 95.0
_ANALOGOUS_SCORE = 85.0


def _hue_differences(hues: list[float] | tuple[float, ...]) -> list[float]:
    if not 2 <= len(hues) <= 3:
        raise ValueError(f"Harmony scoring needs 2 or 3 hues, got {len(hues)}")
    diffs: list[float] = []
    for a, b in combinations(hues, 2):
        diff = abs(a % 360 - b % 360)
        diffs.append(360 - diff if diff > 180 else diff)
    return diffs


def classify_harmony(hues: list[float] | tuple[float, ...]) -> HarmonyKind:
    """色相の組み合わせを補色・トライアド・類似色・その他に分類する。

    Raises:
        ValueError: 色相が2〜3個でない場合。
    """
    diffs = _hue_differences(hues)
    if any(abs(d - 180) < _COMPLEMENTARY_TOLERANCE for d in diffs):
        return "complementary"
    if sum(1 for d in diffs if abs(d - 120) < _TRIADIC_TOLERANCE) >= 2:
        return "triadic"
    if all(d < _ANALOGOUS_LIMIT for d in diffs):
        return "analogous"
    return "none"


def harmony_score(hues: list[float] | tuple[float, ...]) -> float:
    """色相の調和スコア(0〜100)を返す。

    補色・トライアドは95、類似色は85、それ以外は `min(100, 50 + 平均色相差 / 2)`。

    Raises:
        ValueError: 色相が2〜3個でない場合。
    """
    kind = classify_harmony(hues)
    if kind in ("complementary", "triadic"):
        return _SCHEME_SCORE
    if kind == "analogous":
        return _ANALOGOUS_SCORE
    diffs = _hue_differences(hues)
    # 入力順に依存しないよう誤差なしで合計する
    return min(100.0, 50 + (math.fsum(diffs) / len(diffs)) / 2)
