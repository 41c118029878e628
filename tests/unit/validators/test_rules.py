"""組み込みルールのユニットテスト。"""

import pytest

from brandcheck.models.brand import BrandColors, BrandConfig, LogoConfig, Typography
from brandcheck.models.validation import ValidationContext
from brandcheck.validators.policy import ValidationPolicy
from brandcheck.validators.rules import builtin_rules
from brandcheck.validators.rules.accessibility import (
    AudienceTypographyRule,
    BrandColorContrastRule,
    BrandNameScreenReaderRule,
    LogoAltTextRule,
    LogoContrastRule,
    TypographyAccessibilityRule,
)
from brandcheck.validators.rules.base import parse_css_length
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


def _with(config: BrandConfig, **update: object) -> BrandConfig:
    return config.model_copy(update=update)


def _with_logo(config: BrandConfig, **update: object) -> BrandConfig:
    return _with(config, logo=config.logo.model_copy(update=update))


def _with_typography(config: BrandConfig, **update: object) -> BrandConfig:
    return _with(config, typography=config.typography.model_copy(update=update))


class TestBuiltinRules:
    def test_builtin_ids_unique(self, policy: ValidationPolicy) -> None:
        ids = [rule.id for rule in builtin_rules(policy)]
        assert len(ids) == len(set(ids))

    def test_metadata_declared(self, policy: ValidationPolicy) -> None:
        for rule in builtin_rules(policy):
            assert rule.name
            assert rule.category in ("accessibility", "usability", "design", "branding", "technical")
            assert rule.severity in ("error", "warning", "info")


class TestParseCssLength:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [("16px", 16.0), ("1rem", 16.0), ("1.125em", 18.0), ("12", 12.0)],
    )
    def test_supported_units(self, value: str, expected: float) -> None:
        assert parse_css_length(value) == expected

    def test_unsupported_unit(self) -> None:
        assert parse_css_length("12pt") is None


class TestLogoContrastRule:
    def test_relaxed_uses_large_text_threshold(self, policy: ValidationPolicy) -> None:
        # 白文字 / #3B82F6 = 約3.68
        config = BrandConfig(brand_id="t1", colors=BrandColors(primary="#3B82F6"))
        rule = LogoContrastRule(policy)
        relaxed = rule.evaluate(config, ValidationContext(strictness="relaxed"))
        standard = rule.evaluate(config, ValidationContext(strictness="standard"))
        assert relaxed.passed
        assert relaxed.wcag_level == "AA"
        assert not standard.passed
        assert standard.suggestion is not None

    def test_strict_reports_aaa(self, policy: ValidationPolicy) -> None:
        config = BrandConfig(brand_id="t1", colors=BrandColors(primary="#000000"))
        result = LogoContrastRule(policy).evaluate(config, ValidationContext(strictness="strict"))
        assert result.passed
        assert result.wcag_level == "AAA"

    def test_not_applicable_without_background(self, policy: ValidationPolicy) -> None:
        assert not LogoContrastRule(policy).applies(BrandConfig(brand_id="t1"), ValidationContext())


class TestBrandColorContrastRule:
    def test_black_white_passes_strict(self, policy: ValidationPolicy) -> None:
        config = BrandConfig(brand_id="t1", colors=BrandColors(primary="#000000", secondary="#FFFFFF"))
        result = BrandColorContrastRule(policy).evaluate(config, ValidationContext(strictness="strict"))
        assert result.passed
        assert result.wcag_level == "AAA"

    def test_requires_primary_and_secondary(self, policy: ValidationPolicy) -> None:
        config = BrandConfig(brand_id="t1", colors=BrandColors(primary="#000000"))
        assert not BrandColorContrastRule(policy).applies(config, ValidationContext())


class TestLogoAltTextRule:
    def test_descriptive_alt_passes(self, policy: ValidationPolicy, brand_config: BrandConfig) -> None:
        assert LogoAltTextRule(policy).evaluate(brand_config, ValidationContext()).passed

    def test_missing_alt_fails(self, policy: ValidationPolicy, brand_config: BrandConfig) -> None:
        result = LogoAltTextRule(policy).evaluate(_with_logo(brand_config, alt="  "), ValidationContext())
        assert not result.passed
        assert result.wcag_level == "A"
        assert result.path == "logo.alt"

    @pytest.mark.parametrize("alt", ["logo", "LOGO", "Image"])
    def test_generic_alt_fails(self, policy: ValidationPolicy, brand_config: BrandConfig, alt: str) -> None:
        result = LogoAltTextRule(policy).evaluate(_with_logo(brand_config, alt=alt), ValidationContext())
        assert not result.passed
        assert result.severity == "error"


class TestBrandNameScreenReaderRule:
    def test_long_name_fails(self, policy: ValidationPolicy, brand_config: BrandConfig) -> None:
        config = _with(brand_config, name="A" * 60)
        result = BrandNameScreenReaderRule(policy).evaluate(config, ValidationContext())
        assert not result.passed
        assert "60 characters" in result.message

    def test_name_without_letters_fails(self, policy: ValidationPolicy, brand_config: BrandConfig) -> None:
        config = _with(brand_config, name="1234")
        assert not BrandNameScreenReaderRule(policy).evaluate(config, ValidationContext()).passed


class TestTypographyAccessibilityRule:
    def test_defaults_with_font_pass(self, policy: ValidationPolicy, brand_config: BrandConfig) -> None:
        assert TypographyAccessibilityRule(policy).evaluate(brand_config, ValidationContext()).passed

    def test_missing_font_family_fails(self, policy: ValidationPolicy, brand_config: BrandConfig) -> None:
        config = _with_typography(brand_config, font_family=None)
        result = TypographyAccessibilityRule(policy).evaluate(config, ValidationContext())
        assert not result.passed
        assert "no font family" in result.message

    def test_small_base_size_fails(self, policy: ValidationPolicy, brand_config: BrandConfig) -> None:
        sizes = dict(brand_config.typography.font_sizes, base="14px")
        config = _with_typography(brand_config, font_sizes=sizes)
        result = TypographyAccessibilityRule(policy).evaluate(config, ValidationContext())
        assert not result.passed
        assert "14px" in result.message

    def test_tight_line_height_fails(self, policy: ValidationPolicy, brand_config: BrandConfig) -> None:
        config = _with_typography(brand_config, line_heights={"normal": "1.2"})
        assert not TypographyAccessibilityRule(policy).evaluate(config, ValidationContext()).passed


class TestAudienceTypographyRule:
    def test_applies_only_to_seniors(self, policy: ValidationPolicy, brand_config: BrandConfig) -> None:
        rule = AudienceTypographyRule(policy)
        assert not rule.applies(brand_config, ValidationContext())
        assert rule.applies(brand_config, ValidationContext(audience="seniors"))

    def test_senior_friendly_font(self, policy: ValidationPolicy, brand_config: BrandConfig) -> None:
        rule = AudienceTypographyRule(policy)
        context = ValidationContext(audience="seniors")
        assert not rule.evaluate(brand_config, context).passed
        config = _with_typography(brand_config, font_family="Verdana, sans-serif")
        assert rule.evaluate(config, context).passed


class TestBrandNameUsabilityRule:
    def test_special_characters_fail(self, policy: ValidationPolicy, brand_config: BrandConfig) -> None:
        result = BrandNameUsabilityRule(policy).evaluate(_with(brand_config, name="Acme™"), ValidationContext())
        assert not result.passed
        assert "special characters" in result.message

    def test_ampersand_and_hyphen_allowed(self, policy: ValidationPolicy, brand_config: BrandConfig) -> None:
        config = _with(brand_config, name="Smith & Co-op")
        assert BrandNameUsabilityRule(policy).evaluate(config, ValidationContext()).passed

    def test_long_app_name_fails(self, policy: ValidationPolicy, brand_config: BrandConfig) -> None:
        config = _with(brand_config, app_name="Insights Platform Pro")
        assert not BrandNameUsabilityRule(policy).evaluate(config, ValidationContext()).passed


class TestLogoDimensionsRule:
    def test_default_size_passes(self, policy: ValidationPolicy, brand_config: BrandConfig) -> None:
        assert LogoDimensionsRule(policy).evaluate(brand_config, ValidationContext()).passed

    def test_too_small_fails(self, policy: ValidationPolicy, brand_config: BrandConfig) -> None:
        result = LogoDimensionsRule(policy).evaluate(
            _with_logo(brand_config, width=10, height=10), ValidationContext()
        )
        assert not result.passed
        assert result.message == "Logo size: 10x10px"

    def test_distorted_aspect_fails(self, policy: ValidationPolicy, brand_config: BrandConfig) -> None:
        config = _with_logo(brand_config, width=100, height=60)
        result = LogoDimensionsRule(policy).evaluate(config, ValidationContext())
        assert not result.passed
        assert result.suggestion is not None and "20px" in result.suggestion


class TestColorBlindSafetyRule:
    def test_similar_colors_fail(self, policy: ValidationPolicy) -> None:
        config = BrandConfig(brand_id="t1", colors=BrandColors(primary="#3B82F6", secondary="#2563EB"))
        assert not ColorBlindSafetyRule(policy).evaluate(config, ValidationContext()).passed

    def test_distinct_colors_pass(self, policy: ValidationPolicy) -> None:
        config = BrandConfig(brand_id="t1", colors=BrandColors(primary="#000000", secondary="#FFFFFF"))
        assert ColorBlindSafetyRule(policy).evaluate(config, ValidationContext()).passed

    def test_single_color_not_applicable(self, policy: ValidationPolicy, brand_config: BrandConfig) -> None:
        assert not ColorBlindSafetyRule(policy).applies(brand_config, ValidationContext())


class TestColorHarmonyRule:
    def test_complementary_passes(self, policy: ValidationPolicy) -> None:
        config = BrandConfig(brand_id="t1", colors=BrandColors(primary="#FF0000", secondary="#00FFFF"))
        result = ColorHarmonyRule(policy).evaluate(config, ValidationContext())
        assert result.passed
        assert "complementary" in result.message

    def test_unrelated_hues_fail_under_default_policy(self, policy: ValidationPolicy) -> None:
        # 赤(0度)と黄緑(約90度)はどの色相関係にも当てはまらない
        config = BrandConfig(brand_id="t1", colors=BrandColors(primary="#FF0000", secondary="#80FF00"))
        result = ColorHarmonyRule(policy).evaluate(config, ValidationContext())
        assert not result.passed
        assert "(none)" in result.message
        assert result.suggestion is not None

    def test_analogous_passes_under_default_policy(self, policy: ValidationPolicy) -> None:
        config = BrandConfig(brand_id="t1", colors=BrandColors(primary="#FF0000", secondary="#FF4000"))
        assert ColorHarmonyRule(policy).evaluate(config, ValidationContext()).passed

    def test_threshold_from_policy(self) -> None:
        policy = ValidationPolicy(harmony_pass_score=99)
        # 赤と赤橙は類似色（85点）
        config = BrandConfig(brand_id="t1", colors=BrandColors(primary="#FF0000", secondary="#FF4000"))
        assert not ColorHarmonyRule(policy).evaluate(config, ValidationContext()).passed


class TestTypographyConsistencyRule:
    def test_defaults_pass(self, policy: ValidationPolicy, brand_config: BrandConfig) -> None:
        assert TypographyConsistencyRule(policy).evaluate(brand_config, ValidationContext()).passed

    def test_non_standard_weight_fails(self, policy: ValidationPolicy, brand_config: BrandConfig) -> None:
        config = _with_typography(brand_config, font_weights=[400, 450])
        result = TypographyConsistencyRule(policy).evaluate(config, ValidationContext())
        assert not result.passed
        assert "450" in result.message

    def test_heading_not_heavier_fails(self, policy: ValidationPolicy, brand_config: BrandConfig) -> None:
        config = _with_typography(brand_config, heading_font_weight=400)
        assert not TypographyConsistencyRule(policy).evaluate(config, ValidationContext()).passed

    def test_non_ascending_scale_fails(self, policy: ValidationPolicy, brand_config: BrandConfig) -> None:
        config = _with_typography(brand_config, font_sizes={"sm": "1rem", "base": "14px"})
        result = TypographyConsistencyRule(policy).evaluate(config, ValidationContext())
        assert not result.passed
        assert "'base'" in result.message


class TestBrandElementCompletenessRule:
    def test_missing_initials_fails(self, policy: ValidationPolicy, brand_config: BrandConfig) -> None:
        result = BrandElementCompletenessRule(policy).evaluate(
            _with_logo(brand_config, initials=""), ValidationContext()
        )
        assert not result.passed
        assert "logo initials" in result.message


class TestBrandNameUniquenessRule:
    def test_placeholder_name_fails(self, policy: ValidationPolicy, brand_config: BrandConfig) -> None:
        config = _with(brand_config, name="Your Organization")
        assert not BrandNameUniquenessRule(policy).evaluate(config, ValidationContext()).passed

    def test_placeholder_app_name_case_insensitive(self, policy: ValidationPolicy, brand_config: BrandConfig) -> None:
        config = _with(brand_config, app_name="micro app")
        result = BrandNameUniquenessRule(policy).evaluate(config, ValidationContext())
        assert not result.passed
        assert "'micro app'" in result.message


class TestBrandMemorabilityRule:
    def test_many_words_fail(self, policy: ValidationPolicy, brand_config: BrandConfig) -> None:
        config = _with(brand_config, name="Acme Global Analytics")
        assert not BrandMemorabilityRule(policy).evaluate(config, ValidationContext()).passed

    def test_short_name_passes(self, policy: ValidationPolicy, brand_config: BrandConfig) -> None:
        assert BrandMemorabilityRule(policy).evaluate(brand_config, ValidationContext()).passed


class TestBrandScalabilityRule:
    def test_long_initials_fail(self, policy: ValidationPolicy, brand_config: BrandConfig) -> None:
        result = BrandScalabilityRule(policy).evaluate(_with_logo(brand_config, initials="ABCD"), ValidationContext())
        assert not result.passed
        assert "ABCD" in result.message


class TestIndustryColorFitRule:
    def test_not_applicable_without_known_industry(self, policy: ValidationPolicy, brand_config: BrandConfig) -> None:
        rule = IndustryColorFitRule(policy)
        assert not rule.applies(brand_config, ValidationContext())
        assert not rule.applies(brand_config, ValidationContext(industry="retail"))

    def test_healthcare(self, policy: ValidationPolicy) -> None:
        rule = IndustryColorFitRule(policy)
        context = ValidationContext(industry="healthcare")
        calm = BrandConfig(brand_id="t1", colors=BrandColors(primary="#4A7C8C"))
        loud = BrandConfig(brand_id="t1", colors=BrandColors(primary="#FF0000"))
        assert rule.evaluate(calm, context).passed
        assert not rule.evaluate(loud, context).passed

    def test_financial(self, policy: ValidationPolicy) -> None:
        rule = IndustryColorFitRule(policy)
        context = ValidationContext(industry="financial")
        navy = BrandConfig(brand_id="t1", colors=BrandColors(primary="#1E3A5F"))
        gold = BrandConfig(brand_id="t1", colors=BrandColors(primary="#FFD700"))
        assert rule.evaluate(navy, context).passed
        assert not rule.evaluate(gold, context).passed


class TestConfigurationCompletenessRule:
    def test_missing_fields_reported(self, policy: ValidationPolicy) -> None:
        result = ConfigurationCompletenessRule(policy).evaluate(BrandConfig(brand_id="t1"), ValidationContext())
        assert not result.passed
        assert result.category == "technical"
        assert "name, colors.primary" in result.message


class TestColorFormatRule:
    def test_valid_colors_pass(self, policy: ValidationPolicy, brand_config: BrandConfig) -> None:
        assert ColorFormatRule(policy).evaluate(brand_config, ValidationContext()).passed

    def test_invalid_colors_listed(self, policy: ValidationPolicy) -> None:
        config = BrandConfig(
            brand_id="t1",
            colors=BrandColors(primary="blue", secondary="#FFFFFF"),
            logo=LogoConfig(text_color="#GGG"),
            typography=Typography(),
        )
        result = ColorFormatRule(policy).evaluate(config, ValidationContext())
        assert not result.passed
        assert "colors.primary" in result.message
        assert "logo.text_color" in result.message
        assert "colors.secondary" not in result.message
