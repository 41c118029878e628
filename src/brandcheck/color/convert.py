"""16進 ⇄ RGB ⇄ HSL の色空間変換。

すべての関数は純粋関数。不正な16進入力はInvalidColorFormatErrorとして
呼び出し元へ送出し、黒などのデフォルト値で代替しない。
"""

import math
import re

from brandcheck.models.color import HSL, RGB
from brandcheck.models.errors import InvalidColorFormatError

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def _round_channel(value: float) -> int:
    # 四捨五入（偶数丸めではない）後に0〜255へクランプ
    return min(255, max(0, math.floor(value + 0.5)))


def is_valid_hex(value: object) -> bool:
    """3桁または6桁の16進カラー文字列かどうか。"""
    return isinstance(value, str) and _HEX_PATTERN.match(value.strip()) is not None


def normalize_hex(value: str) -> str:
    """16進カラーを小文字6桁の `#rrggbb` 形式に正規化する。

    Raises:
        InvalidColorFormatError: 16進カラーとして解釈できない場合。
    """
    if not isinstance(value, str):
        raise InvalidColorFormatError(value)
    match = _HEX_PATTERN.match(value.strip())
    if match is None:
        raise InvalidColorFormatError(value)
    digits = match.group(1).lower()
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits}"


def hex_to_rgb(value: str) -> RGB:
    """16進カラーをRGBに変換する。

    Args:
        value: `#RGB` / `#RRGGBB`（先頭の`#`は省略可、大文字小文字は区別しない）。

    Returns:
        各チャンネル0〜255のRGB。

    Raises:
        InvalidColorFormatError: 16進カラーとして解釈できない場合。
    """
    digits = normalize_hex(value)[1:]
    return RGB(r=int(digits[0:2], 16), g=int(digits[2:4], 16), b=int(digits[4:6], 16))


def rgb_to_hex(rgb: RGB) -> str:
    """RGBを小文字の `#rrggbb` に変換する。"""
    r, g, b = (min(255, max(0, c)) for c in rgb.as_tuple())
    return f"#{r:02x}{g:02x}{b:02x}"


def rgb_to_hsl(rgb: RGB) -> HSL:
    """RGBをHSLに変換する。

    明度は最大・最小チャンネルの平均、彩度は無彩色なら0。
    色相は最大チャンネルから60度単位のセクタで求め、[0, 360)へ正規化する。
    """
    r, g, b = (c / 255 for c in rgb.as_tuple())
    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2

    if high == low:
        return HSL(h=0.0, s=0.0, l=lightness * 100)

    delta = high - low
    if lightness > 0.5:
        saturation = delta / (2 - high - low)
    else:
        saturation = delta / (high + low)

    if high == r:
        hue = (g - b) / delta + (6 if g < b else 0)
    elif high == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4

    return HSL(h=(hue * 60) % 360, s=min(100.0, saturation * 100), l=min(100.0, lightness * 100))


def hsl_to_rgb(hsl: HSL) -> RGB:
    """HSLをRGBに変換する。各チャンネルは四捨五入して0〜255にクランプする。"""
    s = hsl.s / 100
    lightness = hsl.l / 100
    chroma = (1 - abs(2 * lightness - 1)) * s
    sector = (hsl.h % 360) / 60
    x = chroma * (1 - abs(sector % 2 - 1))
    m = lightness - chroma / 2

    if sector < 1:
        r, g, b = chroma, x, 0.0
    elif sector < 2:
        r, g, b = x, chroma, 0.0
    elif sector < 3:
        r, g, b = 0.0, chroma, x
    elif sector < 4:
        r, g, b = 0.0, x, chroma
    elif sector < 5:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return RGB(
        r=_round_channel((r + m) * 255),
        g=_round_channel((g + m) * 255),
        b=_round_channel((b + m) * 255),
    )


def hex_to_hsl(value: str) -> HSL:
    """16進カラーをHSLに変換する。"""
    return rgb_to_hsl(hex_to_rgb(value))


def hsl_to_hex(hsl: HSL) -> str:
    """HSLを16進カラーに変換する。"""
    return rgb_to_hex(hsl_to_rgb(hsl))
