"""組み込みバリデーションルール。"""

from brandcheck.models.validation import ValidationRule
from brandcheck.validators.policy import ValidationPolicy
from brandcheck.validators.rules.accessibility import (
    AudienceTypographyRule,
    BrandColorContrastRule,
    BrandNameScreenReaderRule,
    LogoAltTextRule,
    LogoContrastRule,
    TypographyAccessibilityRule,
)
from brandcheck.validators.rules.branding import (
    BrandMemorabilityRule,
    BrandNameUniquenessRule,
    BrandScalabilityRule,
    IndustryColorFitRule,
)
from brandcheck.validators.rules.design import (
    BrandElementCompletenessRule,
    ColorHarmonyRule,
    TypographyConsistencyRule,
)
from brandcheck.validators.rules.technical import ColorFormatRule, ConfigurationCompletenessRule
from brandcheck.validators.rules.usability import (
    BrandNameUsabilityRule,
    ColorBlindSafetyRule,
    LogoDimensionsRule,
)

# 登録順 = 実行順
_BUILTIN_RULE_TYPES = (
    LogoContrastRule,
    BrandColorContrastRule,
    LogoAltTextRule,
    BrandNameScreenReaderRule,
    TypographyAccessibilityRule,
    AudienceTypographyRule,
    BrandNameUsabilityRule,
    LogoDimensionsRule,
    ColorBlindSafetyRule,
    ColorHarmonyRule,
    TypographyConsistencyRule,
    BrandElementCompletenessRule,
    BrandNameUniquenessRule,
    BrandMemorabilityRule,
    BrandScalabilityRule,
    IndustryColorFitRule,
    ConfigurationCompletenessRule,
    ColorFormatRule,
)


def builtin_rules(policy: ValidationPolicy) -> list[ValidationRule]:
    """組み込みルールのインスタンスを実行順に生成する。"""
    return [rule_type(policy) for rule_type in _BUILTIN_RULE_TYPES]


__all__ = ["builtin_rules"]
