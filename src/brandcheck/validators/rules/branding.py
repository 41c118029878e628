"""ブランディング系の組み込みルール。"""

from brandcheck.color.convert import hex_to_rgb
from brandcheck.models.brand import BrandConfig
from brandcheck.models.validation import ValidationContext, ValidationResult
from brandcheck.validators.rules.base import PolicyRule

_MEMORABLE_NAME_LENGTH = 25
_MEMORABLE_APP_NAME_LENGTH = 15
_MEMORABLE_MAX_WORDS = 2
_MAX_INITIALS = 3


class BrandNameUniquenessRule(PolicyRule):
    """既定のプレースホルダー名が残っていないか。"""

    id = "brand-name-uniqueness"
    name = "Brand Name Uniqueness"
    description = "Brand names must not be default placeholders"
    category = "branding"
    severity = "warning"
    path = "name"

    def applies(self, config: BrandConfig, context: ValidationContext) -> bool:
        return bool(config.name.strip())

    def evaluate(self, config: BrandConfig, context: ValidationContext) -> ValidationResult:
        placeholders = {name.casefold() for name in self.policy.placeholder_names}
        found = [n for n in (config.name.strip(), config.app_name.strip()) if n and n.casefold() in placeholders]
        if found:
            return self.result(
                False,
                "Brand name appears to be a default placeholder: " + ", ".join(f"'{n}'" for n in found),
                "Replace default brand names with unique, meaningful names",
            )
        return self.result(True, "Brand names are unique and meaningful")


class BrandMemorabilityRule(PolicyRule):
    """短く覚えやすい名前か。"""

    id = "brand-memorability"
    name = "Brand Memorability"
    description = "Brand names should be short and simple to recall"
    category = "branding"
    severity = "warning"
    path = "name"

    def applies(self, config: BrandConfig, context: ValidationContext) -> bool:
        return bool(config.name.strip())

    def evaluate(self, config: BrandConfig, context: ValidationContext) -> ValidationResult:
        name = config.name.strip()
        app_name = config.app_name.strip()
        memorable = (
            len(name) <= _MEMORABLE_NAME_LENGTH
            and len(name.split()) <= _MEMORABLE_MAX_WORDS
            and len(app_name) <= _MEMORABLE_APP_NAME_LENGTH
        )
        if memorable:
            return self.result(True, "Brand names are memorable and easy to recall")
        return self.result(
            False,
            "Brand name may be hard to remember",
            f"Prefer names of at most {_MEMORABLE_MAX_WORDS} words and {_MEMORABLE_NAME_LENGTH} characters",
        )


class BrandScalabilityRule(PolicyRule):
    """小さな表示サイズでもブランドが成立するか。"""

    id = "brand-scalability"
    name = "Brand Scalability"
    description = "Brand elements should work across display sizes"
    category = "branding"
    severity = "warning"
    path = "logo"

    def evaluate(self, config: BrandConfig, context: ValidationContext) -> ValidationResult:
        area = config.logo.width * config.logo.height
        initials = config.logo.initials.strip()
        issues: list[str] = []
        if area < self.policy.logo_min_area:
            issues.append(f"logo area {area}px² is below {self.policy.logo_min_area}px²")
        if len(initials) > _MAX_INITIALS:
            issues.append(f"initials '{initials}' exceed {_MAX_INITIALS} characters")

        if issues:
            return self.result(
                False,
                "Brand may not scale down well: " + "; ".join(issues),
                "Ensure brand elements work well at different sizes and contexts",
            )
        return self.result(True, "Brand elements are scalable across different use cases")


class IndustryColorFitRule(PolicyRule):
    """業種に対してprimaryカラーが適切か（業種指定時のみ）。"""

    id = "industry-color-fit"
    name = "Industry Color Fit"
    description = "Primary color should match the expectations of the declared industry"
    category = "branding"
    severity = "warning"
    path = "colors.primary"

    _INDUSTRIES = frozenset({"healthcare", "financial"})

    def applies(self, config: BrandConfig, context: ValidationContext) -> bool:
        return context.industry in self._INDUSTRIES and bool(config.colors.primary)

    def evaluate(self, config: BrandConfig, context: ValidationContext) -> ValidationResult:
        rgb = hex_to_rgb(config.colors.primary or "")
        spread = max(rgb.as_tuple()) - min(rgb.as_tuple())

        if context.industry == "healthcare":
            # 落ち着いた寒色系（低彩度かつ青または緑が優勢）
            fits = spread < 150 and (rgb.b > rgb.r or rgb.g > rgb.r)
            suggestion = "Consider calming, professional colors like blues or greens"
        else:
            # 暗めで彩度の低い色
            fits = sum(rgb.as_tuple()) / 3 < 200 and spread < 100
            suggestion = "Consider professional colors like navy blue or dark green that convey trust"

        if fits:
            return self.result(True, f"Primary color suits the {context.industry} industry")
        return self.result(False, f"Primary color may not be appropriate for the {context.industry} industry", suggestion)
