"""WCAG 2.x の相対輝度とコントラスト比。"""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from brandcheck.color.convert import hex_to_rgb
from brandcheck.models.validation import WcagLevel

TextSize = Literal["normal", "large", "ui"]

# (テキストサイズ, レベル) → 必要コントラスト比
# WCAGにはレベルA固有のコントラスト基準がないため、AをAAと同じ扱いにする
_REQUIRED_RATIOS: dict[tuple[str, str], float] = {
    ("normal", "A"): 4.5,
    ("normal", "AA"): 4.5,
    ("normal", "AAA"): 7.0,
    ("large", "A"): 3.0,
    ("large", "AA"): 3.0,
    ("large", "AAA"): 4.5,
    ("ui", "A"): 3.0,
    ("ui", "AA"): 3.0,
    ("ui", "AAA"): 4.5,
}


class ContrastReport(BaseModel):
    """2色間のコントラスト比と、テキストサイズ・レベル別の合否。"""

    model_config = ConfigDict(frozen=True)

    foreground: str
    background: str
    ratio: float
    normal_aa: bool
    normal_aaa: bool
    large_aa: bool
    large_aaa: bool


def _linearize(channel: int) -> float:
    c = channel / 255
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: str) -> float:
    """相対輝度(0〜1)を返す。

    Raises:
        InvalidColorFormatError: colorが16進カラーとして解釈できない場合。
    """
    rgb = hex_to_rgb(color)
    return 0.2126 * _linearize(rgb.r) + 0.7152 * _linearize(rgb.g) + 0.0722 * _linearize(rgb.b)


def contrast_ratio(a: str, b: str) -> float:
    """2色のコントラスト比(1〜21)。引数の順序に依存しない。"""
    lum_a = relative_luminance(a)
    lum_b = relative_luminance(b)
    lighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


def required_ratio(text_size: TextSize, level: WcagLevel) -> float:
    """テキストサイズとWCAGレベルに対する最小コントラスト比。"""
    try:
        return _REQUIRED_RATIOS[(text_size, level)]
    except KeyError:
        raise ValueError(f"Unknown text size / WCAG level: {text_size!r}, {level!r}") from None


def passes_wcag(ratio: float, text_size: TextSize, level: WcagLevel) -> bool:
    """コントラスト比がWCAG基準を満たすかどうか。

    通常テキストはAA 4.5 / AAA 7.0、大きなテキストとUI要素はAA 3.0 / AAA 4.5。
    """
    return ratio >= required_ratio(text_size, level)


def analyze_pair(foreground: str, background: str) -> ContrastReport:
    """前景色・背景色のコントラストを全基準で判定する。"""
    ratio = contrast_ratio(foreground, background)
    return ContrastReport(
        foreground=foreground,
        background=background,
        ratio=ratio,
        normal_aa=passes_wcag(ratio, "normal", "AA"),
        normal_aaa=passes_wcag(ratio, "normal", "AAA"),
        large_aa=passes_wcag(ratio, "large", "AA"),
        large_aaa=passes_wcag(ratio, "large", "AAA"),
    )
