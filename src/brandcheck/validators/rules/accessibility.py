"""アクセシビリティ系の組み込みルール。"""

from brandcheck.color.contrast import contrast_ratio, required_ratio
from brandcheck.models.brand import BrandConfig
from brandcheck.models.validation import ValidationContext, ValidationResult
from brandcheck.validators.rules.base import STRICTNESS_TARGETS, PolicyRule, parse_css_length

# 行間の最小値（WCAG 1.4.12）
_MIN_LINE_HEIGHT = 1.5
_MIN_BODY_WEIGHT = 300


class LogoContrastRule(PolicyRule):
    """ロゴ文字色とロゴ背景色のコントラスト。"""

    id = "color-contrast-logo"
    name = "Logo Color Contrast"
    description = "Logo text must be readable against the logo background"
    category = "accessibility"
    severity = "error"
    wcag_level = "AA"
    path = "logo"

    def applies(self, config: BrandConfig, context: ValidationContext) -> bool:
        return config.logo_background() is not None

    def evaluate(self, config: BrandConfig, context: ValidationContext) -> ValidationResult:
        ratio = contrast_ratio(config.logo.text_color, config.logo_background() or "")
        text_size, level = STRICTNESS_TARGETS[context.strictness]
        minimum = required_ratio(text_size, level)  # type: ignore[arg-type]
        passed = ratio >= minimum
        return self.result(
            passed,
            f"Logo contrast ratio: {ratio:.2f}:1 (minimum {minimum}:1)",
            None
            if passed
            else f"Increase contrast between logo text and background to at least {minimum}:1 for WCAG {level}",
            wcag_level=level,
        )


class BrandColorContrastRule(PolicyRule):
    """primaryとsecondaryを前景・背景として組み合わせた場合のコントラスト。"""

    id = "brand-color-contrast"
    name = "Brand Color Contrast"
    description = "Primary and secondary colors must be distinguishable when paired"
    category = "accessibility"
    severity = "error"
    wcag_level = "AA"
    path = "colors"

    def applies(self, config: BrandConfig, context: ValidationContext) -> bool:
        return bool(config.colors.primary and config.colors.secondary)

    def evaluate(self, config: BrandConfig, context: ValidationContext) -> ValidationResult:
        ratio = contrast_ratio(config.colors.primary or "", config.colors.secondary or "")
        text_size, level = STRICTNESS_TARGETS[context.strictness]
        minimum = required_ratio(text_size, level)  # type: ignore[arg-type]
        passed = ratio >= minimum
        return self.result(
            passed,
            f"Primary/secondary contrast ratio: {ratio:.2f}:1 (minimum {minimum}:1)",
            None
            if passed
            else f"Increase contrast between primary and secondary colors to meet WCAG {level}",
            wcag_level=level,
        )


class LogoAltTextRule(PolicyRule):
    """ロゴの代替テキストの有無と具体性。"""

    id = "logo-alt-text"
    name = "Logo Alt Text"
    description = "Logo must carry descriptive alternative text for screen readers"
    category = "accessibility"
    severity = "error"
    wcag_level = "A"
    path = "logo.alt"

    def evaluate(self, config: BrandConfig, context: ValidationContext) -> ValidationResult:
        alt = config.logo.alt.strip()
        if not alt:
            return self.result(
                False,
                "Logo is missing alt text for screen readers",
                "Add alt text that names the organization, e.g. 'Acme Corp logo'",
            )
        generic = {text.casefold() for text in self.policy.generic_alt_texts}
        if alt.casefold() in generic:
            return self.result(
                False,
                f"Logo alt text '{alt}' does not describe the brand",
                "Replace generic alt text with the brand name, e.g. 'Acme Corp logo'",
            )
        return self.result(True, "Logo has descriptive alt text")


class BrandNameScreenReaderRule(PolicyRule):
    """ブランド名がスクリーンリーダーで読み上げやすい長さ・構成か。"""

    id = "brand-name-screen-reader"
    name = "Brand Name Screen Reader Readiness"
    description = "Brand names should be short enough and pronounceable for assistive technology"
    category = "accessibility"
    severity = "warning"
    wcag_level = "AA"
    path = "name"

    def applies(self, config: BrandConfig, context: ValidationContext) -> bool:
        return bool(config.name.strip())

    def evaluate(self, config: BrandConfig, context: ValidationContext) -> ValidationResult:
        name = config.name.strip()
        app_name = config.app_name.strip()
        issues: list[str] = []
        if not 2 <= len(name) <= 50:
            issues.append(f"organization name is {len(name)} characters (expected 2-50)")
        if app_name and not 2 <= len(app_name) <= 30:
            issues.append(f"app name is {len(app_name)} characters (expected 2-30)")
        if not any(ch.isalpha() for ch in name):
            issues.append("organization name contains no letters")

        if issues:
            return self.result(
                False,
                "Brand name may be hard to announce: " + "; ".join(issues),
                "Ensure brand names are readable and not too long for screen readers",
            )
        return self.result(True, f"Brand name is {len(name)} characters and readable")


class TypographyAccessibilityRule(PolicyRule):
    """本文の文字サイズ・ウェイト・行間の最低基準。"""

    id = "typography-accessibility"
    name = "Typography Accessibility"
    description = "Body text must meet minimum size, weight and line-height requirements"
    category = "accessibility"
    severity = "warning"
    wcag_level = "AA"
    path = "typography"

    def evaluate(self, config: BrandConfig, context: ValidationContext) -> ValidationResult:
        typography = config.typography
        issues: list[str] = []

        if not (typography.font_family or "").strip():
            issues.append("no font family configured")

        base = typography.font_sizes.get("base")
        if base is not None:
            base_px = parse_css_length(base)
            if base_px is None:
                issues.append(f"base font size '{base}' is not a px/rem/em length")
            elif base_px < self.policy.min_body_font_px:
                issues.append(f"base font size is {base_px:g}px (minimum {self.policy.min_body_font_px:g}px)")

        if typography.body_font_weight < _MIN_BODY_WEIGHT:
            issues.append(f"body font weight {typography.body_font_weight} is too light")

        normal = typography.line_heights.get("normal")
        if normal is not None:
            try:
                if float(normal) < _MIN_LINE_HEIGHT:
                    issues.append(f"normal line height {normal} is below {_MIN_LINE_HEIGHT}")
            except ValueError:
                issues.append(f"normal line height '{normal}' is not a unitless number")

        if issues:
            return self.result(
                False,
                "Typography accessibility issues: " + "; ".join(issues),
                "Use at least 16px body text, weight 300 or heavier and a line height of 1.5",
            )
        return self.result(True, "Typography meets minimum readability requirements")


class AudienceTypographyRule(PolicyRule):
    """対象オーディエンスに適したフォントか（オーディエンス指定時のみ）。"""

    id = "audience-typography"
    name = "Audience Typography"
    description = "Font family should suit the declared target audience"
    category = "accessibility"
    severity = "warning"
    path = "typography.font_family"

    _AUDIENCES = frozenset({"seniors"})

    def applies(self, config: BrandConfig, context: ValidationContext) -> bool:
        return context.audience in self._AUDIENCES and bool(config.typography.font_family)

    def evaluate(self, config: BrandConfig, context: ValidationContext) -> ValidationResult:
        family = config.typography.font_family or ""
        passed = any(font.casefold() in family.casefold() for font in self.policy.senior_friendly_fonts)
        if passed:
            return self.result(True, f"Font family '{family}' suits a {context.audience} audience")
        return self.result(
            False,
            f"Font family '{family}' may not be senior-friendly",
            "Use clear, readable fonts such as " + ", ".join(self.policy.senior_friendly_fonts),
        )
