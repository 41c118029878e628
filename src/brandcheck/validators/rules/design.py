"""デザイン一貫性系の組み込みルール。"""

from brandcheck.color.convert import hex_to_hsl
from brandcheck.color.harmony import classify_harmony, harmony_score
from brandcheck.models.brand import BrandConfig
from brandcheck.models.validation import ValidationContext, ValidationResult
from brandcheck.validators.rules.base import PolicyRule, parse_css_length


class ColorHarmonyRule(PolicyRule):
    """primary/secondary/accentの色相関係。"""

    id = "color-harmony"
    name = "Color Harmony"
    description = "Brand colors should follow a recognizable hue relationship"
    category = "design"
    severity = "warning"
    path = "colors"

    def applies(self, config: BrandConfig, context: ValidationContext) -> bool:
        return len(config.colors.brand_palette()) >= 2

    def evaluate(self, config: BrandConfig, context: ValidationContext) -> ValidationResult:
        hues = [hex_to_hsl(color).h for color in config.colors.brand_palette()]
        score = harmony_score(hues)
        kind = classify_harmony(hues)
        message = f"Color harmony score: {score:.0f}/100 ({kind})"
        # 認識できる色相関係がない組み合わせはスコアに関係なく失敗
        if kind == "none" or score < self.policy.harmony_pass_score:
            return self.result(
                False,
                message,
                "Consider complementary, triadic or analogous hue relationships for better visual harmony",
            )
        return self.result(True, message)


class TypographyConsistencyRule(PolicyRule):
    """ウェイトと文字サイズスケールの整合性。"""

    id = "typography-consistency"
    name = "Typography Consistency"
    description = "Font weights and the type scale should be internally consistent"
    category = "design"
    severity = "warning"
    path = "typography"

    def evaluate(self, config: BrandConfig, context: ValidationContext) -> ValidationResult:
        typography = config.typography
        issues: list[str] = []

        invalid_weights = [w for w in typography.font_weights if w % 100 != 0 or not 100 <= w <= 900]
        if invalid_weights:
            issues.append(f"non-standard font weights {invalid_weights}")

        if typography.heading_font_weight <= typography.body_font_weight:
            issues.append("heading weight is not heavier than body weight")

        previous: float | None = None
        for size_name, size in typography.font_sizes.items():
            px = parse_css_length(size)
            if px is None:
                issues.append(f"font size '{size_name}' has unsupported value '{size}'")
                continue
            if previous is not None and px <= previous:
                issues.append(f"font size '{size_name}' does not increase the scale")
            previous = px

        if issues:
            return self.result(
                False,
                "Typography inconsistencies: " + "; ".join(issues),
                "Use weights in steps of 100 and an ascending type scale",
            )
        return self.result(True, "Typography scale and weights are consistent")


class BrandElementCompletenessRule(PolicyRule):
    """ブランド要素（組織名・アプリ名・イニシャル）が揃っているか。"""

    id = "brand-element-completeness"
    name = "Brand Element Completeness"
    description = "All brand elements should be defined"
    category = "design"
    severity = "warning"
    path = "name"

    def evaluate(self, config: BrandConfig, context: ValidationContext) -> ValidationResult:
        elements = {
            "organization name": config.name,
            "app name": config.app_name,
            "logo initials": config.logo.initials,
        }
        missing = [label for label, value in elements.items() if not value.strip()]
        if missing:
            return self.result(
                False,
                "Missing brand elements: " + ", ".join(missing),
                "Ensure all brand elements (organization name, app name, initials) are defined",
            )
        return self.result(True, "All brand elements are consistently defined")
