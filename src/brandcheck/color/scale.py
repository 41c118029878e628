"""1色のベースカラーから11段階のカラースケールを生成する。"""

from brandcheck.color.convert import hex_to_hsl, hsl_to_hex
from brandcheck.models.color import HSL, ColorScale

# 500より明るいストップ: (明度オフセット, 彩度オフセット)
_LIGHTER_OFFSETS: dict[int, tuple[float, float]] = {
    50: (45, -30),
    100: (35, -20),
    200: (25, -10),
    300: (15, 0),
    400: (5, 0),
}

# 500より暗いストップ: 明度オフセットのみ（彩度は維持）
_DARKER_OFFSETS: dict[int, float] = {
    600: -5,
    700: -15,
    800: -25,
    900: -35,
    950: -45,
}


def _clamp(value: float) -> float:
    return min(100.0, max(0.0, value))


def generate_scale(base: str) -> ColorScale:
    """ベースカラーからTailwind形式の11段階スケールを生成する。

    500はベースカラーの文字列をそのまま返す（HSL往復による丸め誤差を避けるため）。

    Args:
        base: ベースとなる16進カラー。

    Returns:
        50〜950のストップを持つColorScale。

    Raises:
        InvalidColorFormatError: baseが16進カラーとして解釈できない場合。
    """
    hsl = hex_to_hsl(base)
    stops: dict[int, str] = {}

    for stop, (light_offset, sat_offset) in _LIGHTER_OFFSETS.items():
        stops[stop] = hsl_to_hex(HSL(h=hsl.h, s=_clamp(hsl.s + sat_offset), l=_clamp(hsl.l + light_offset)))

    stops[500] = base

    for stop, light_offset in _DARKER_OFFSETS.items():
        stops[stop] = hsl_to_hex(HSL(h=hsl.h, s=hsl.s, l=_clamp(hsl.l + light_offset)))

    return ColorScale(stops)


def generate_scales(colors: dict[str, str]) -> dict[str, ColorScale]:
    """ロール名→ベースカラーの辞書から、ロールごとのスケールを生成する。"""
    return {role: generate_scale(color) for role, color in colors.items()}
