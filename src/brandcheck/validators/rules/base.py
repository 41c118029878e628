"""組み込みルール共通の基底クラスとヘルパー。"""

import re

from brandcheck.models.validation import ValidationRule, WcagLevel
from brandcheck.validators.policy import ValidationPolicy

_CSS_LENGTH = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(px|rem|em)?\s*$")

# rem/em換算の基準（ブラウザ既定のルートフォントサイズ）
_ROOT_FONT_PX = 16.0

# strictness → コントラスト判定に使う (テキストサイズ, WCAGレベル)
STRICTNESS_TARGETS: dict[str, tuple[str, WcagLevel]] = {
    "relaxed": ("large", "AA"),
    "standard": ("normal", "AA"),
    "strict": ("normal", "AAA"),
}


def parse_css_length(value: str) -> float | None:
    """`16px` / `1rem` / `1.125em` をピクセル値に変換する。解釈できない場合はNone。"""
    match = _CSS_LENGTH.match(value)
    if match is None:
        return None
    number = float(match.group(1))
    unit = match.group(2) or "px"
    return number if unit == "px" else number * _ROOT_FONT_PX


class PolicyRule(ValidationRule):
    """ValidationPolicyの定数を参照する組み込みルール。"""

    def __init__(self, policy: ValidationPolicy) -> None:
        self.policy = policy
