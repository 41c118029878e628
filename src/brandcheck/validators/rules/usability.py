"""ユーザビリティ系の組み込みルール。"""

import re
from itertools import combinations

from brandcheck.color.contrast import contrast_ratio
from brandcheck.models.brand import BrandConfig
from brandcheck.models.validation import ValidationContext, ValidationResult
from brandcheck.validators.rules.base import PolicyRule

_SPECIAL_CHARS = re.compile(r"[^a-zA-Z0-9\s\-&]")
_MAX_NAME_LENGTH = 30
_MAX_APP_NAME_LENGTH = 20


class BrandNameUsabilityRule(PolicyRule):
    """ブランド名の長さと使用文字。"""

    id = "brand-name-usability"
    name = "Brand Name Usability"
    description = "Brand names should be short and free of special characters"
    category = "usability"
    severity = "warning"
    path = "name"

    def applies(self, config: BrandConfig, context: ValidationContext) -> bool:
        return bool(config.name.strip())

    def evaluate(self, config: BrandConfig, context: ValidationContext) -> ValidationResult:
        name = config.name.strip()
        app_name = config.app_name.strip()

        if _SPECIAL_CHARS.search(name) or _SPECIAL_CHARS.search(app_name):
            return self.result(
                False,
                "Brand name contains special characters",
                "Avoid special characters in brand names for better usability",
            )
        if len(name) > _MAX_NAME_LENGTH or len(app_name) > _MAX_APP_NAME_LENGTH:
            return self.result(
                False,
                f"Brand name is too long ({len(name)} / {len(app_name)} characters)",
                f"Keep the organization name within {_MAX_NAME_LENGTH} and the app name within "
                f"{_MAX_APP_NAME_LENGTH} characters",
            )
        return self.result(True, "Brand names are short and use plain characters")


class LogoDimensionsRule(PolicyRule):
    """ロゴの面積と縦横差。"""

    id = "logo-dimensions"
    name = "Logo Size and Aspect Ratio"
    description = "Logo must fit display slots without distortion"
    category = "usability"
    severity = "warning"
    path = "logo"

    def evaluate(self, config: BrandConfig, context: ValidationContext) -> ValidationResult:
        width, height = config.logo.width, config.logo.height
        area = width * height
        size_ok = self.policy.logo_min_area <= area <= self.policy.logo_max_area
        aspect_ok = abs(width - height) <= self.policy.logo_max_side_difference
        message = f"Logo size: {width}x{height}px"

        if not size_ok:
            return self.result(
                False,
                message,
                f"Logo area should be between {self.policy.logo_min_area} and {self.policy.logo_max_area} "
                "square pixels for optimal usability",
            )
        if not aspect_ok:
            return self.result(
                False,
                message,
                f"Keep logo width and height within {self.policy.logo_max_side_difference}px of each other",
            )
        return self.result(True, message)


class ColorBlindSafetyRule(PolicyRule):
    """ブランドカラー同士が輝度差だけで区別できるか。

    色覚特性に依存せず識別できるよう、各ペアの最小コントラストで近似判定する。
    """

    id = "color-blind-safety"
    name = "Color-Blind Safety"
    description = "Brand colors should remain distinguishable without relying on hue"
    category = "usability"
    severity = "warning"
    path = "colors"

    def applies(self, config: BrandConfig, context: ValidationContext) -> bool:
        return len(config.colors.brand_palette()) >= 2

    def evaluate(self, config: BrandConfig, context: ValidationContext) -> ValidationResult:
        palette = config.colors.brand_palette()
        lowest = min(contrast_ratio(a, b) for a, b in combinations(palette, 2))
        minimum = self.policy.color_blind_min_contrast
        if lowest < minimum:
            return self.result(
                False,
                f"Closest brand color pair has a contrast of {lowest:.2f}:1 (minimum {minimum}:1)",
                "Ensure information is not conveyed by color alone or increase the lightness difference",
            )
        return self.result(True, f"Brand colors are distinguishable (lowest pair contrast {lowest:.2f}:1)")
