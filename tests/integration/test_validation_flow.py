"""ブランド設定のバリデーション〜テーマ生成の統合テスト。"""

from pathlib import Path

import pytest

from brandcheck.config import ValidatorSettings
from brandcheck.models.brand import BrandColors, BrandConfig, LogoConfig, Typography
from brandcheck.models.validation import ValidationContext
from brandcheck.services.theme import ThemeGenerator
from brandcheck.services.validation import BrandValidationService, create_validation_service


@pytest.fixture
def flow_service(config_dir: Path) -> BrandValidationService:
    return create_validation_service(ValidatorSettings(config_dir=config_dir))


def _acme(alt: str = "logo", background_color: str | None = "#1D4ED8") -> BrandConfig:
    return BrandConfig(
        brand_id="acme",
        name="Acme Analytics",
        app_name="Insights",
        colors=BrandColors(primary="#3B82F6"),
        typography=Typography(font_family="Inter, sans-serif"),
        logo=LogoConfig(alt=alt, initials="AA", background_color=background_color, text_color="#FFFFFF"),
    )


class TestGenericLogoAltText:
    def test_alt_text_failure_is_scored(self, flow_service: BrandValidationService) -> None:
        report = flow_service.validate(_acme())

        failure = report.result_for("logo-alt-text")
        assert failure is not None
        assert not failure.passed
        assert failure.severity == "error"
        assert failure.category == "accessibility"

        assert [r.rule_id for r in report.failures()] == ["logo-alt-text"]
        assert report.scores.accessibility == 85
        assert (report.scores.usability, report.scores.design, report.scores.branding) == (100, 100, 100)
        assert report.overall_score == 96
        assert not report.is_valid
        assert not report.wcag_compliance.level_a
        assert report.wcag_compliance.level_aa

    def test_counts_exclude_skipped_rules(self, flow_service: BrandValidationService) -> None:
        report = flow_service.validate(_acme())
        assert set(report.skipped_rules) == {
            "brand-color-contrast",
            "audience-typography",
            "color-blind-safety",
            "color-harmony",
            "industry-color-fit",
        }
        assert report.total_checks == 13
        assert report.passed_checks == 12
        assert report.failed_checks == 1

    def test_relaxed_logo_contrast_on_primary(self, flow_service: BrandValidationService) -> None:
        # ロゴ背景未設定 → primary(#3B82F6)上の白文字、約3.68:1
        report = flow_service.validate(
            _acme(background_color=None), ValidationContext(strictness="relaxed")
        )
        contrast = report.result_for("color-contrast-logo")
        assert contrast is not None
        assert contrast.passed
        assert "3.68:1" in contrast.message


class TestBlackAndWhitePalette:
    def test_strict_contrast_rules_pass_at_aaa(self, flow_service: BrandValidationService) -> None:
        config = BrandConfig(
            brand_id="mono",
            name="Mono Labs",
            app_name="Mono",
            colors=BrandColors(primary="#000000", secondary="#FFFFFF"),
            typography=Typography(font_family="Inter, sans-serif"),
            logo=LogoConfig(alt="Mono Labs logo", initials="ML"),
        )
        report = flow_service.validate(config, ValidationContext(strictness="strict"))

        for rule_id in ("color-contrast-logo", "brand-color-contrast"):
            result = report.result_for(rule_id)
            assert result is not None
            assert result.passed
            assert result.wcag_level == "AAA"
        assert report.wcag_summary["AAA"].total == 2
        assert report.wcag_summary["AAA"].failed == 0
        assert report.wcag_compliance.level_aaa
        assert report.is_valid


class TestDeterminism:
    def test_repeated_validation_identical_except_timestamp(self, config_dir: Path) -> None:
        service = create_validation_service(ValidatorSettings(config_dir=config_dir, cache_enabled=False))
        first = service.validate(_acme())
        second = service.validate(_acme())
        assert first is not second
        assert first.model_dump(exclude={"timestamp"}) == second.model_dump(exclude={"timestamp"})

    def test_cached_and_uncached_reports_match(self, flow_service: BrandValidationService, config_dir: Path) -> None:
        uncached = create_validation_service(ValidatorSettings(config_dir=config_dir, cache_enabled=False))
        assert flow_service.validate(_acme()).model_dump(exclude={"timestamp"}) == uncached.validate(
            _acme()
        ).model_dump(exclude={"timestamp"})


class TestThemeForValidatedBrand:
    def test_validated_brand_produces_theme_css(self, flow_service: BrandValidationService) -> None:
        config = _acme(alt="Acme Analytics logo")
        assert flow_service.validate(config).is_valid

        generator = ThemeGenerator()
        theme = generator.generate_theme(config)
        css = generator.export_css(theme)
        assert "--color-primary-500: #3B82F6;" in css
        assert theme.accessibility.contrast_ratios["primary-500-white"] < 4.5
