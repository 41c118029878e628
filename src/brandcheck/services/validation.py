"""ブランド設定バリデーションのサービス層。

エンジン・キャッシュ・設定を束ね、呼び出し側向けの操作を提供する。
"""

import logging
import threading

from pydantic import BaseModel

from brandcheck.config import ValidatorSettings
from brandcheck.models.brand import BrandConfig
from brandcheck.models.validation import ValidationContext, ValidationReport, ValidationResult, WcagLevel
from brandcheck.services.theme import preset_config
from brandcheck.validators.cache import CacheStats, ValidationCache, fingerprint
from brandcheck.validators.engine import ValidationRuleEngine
from brandcheck.validators.policy import ValidationPolicy

logger = logging.getLogger(__name__)


class ServiceStats(BaseModel):
    """サービスで実行したバリデーションの統計。"""

    total_validations: int
    average_score: int
    error_rate: float
    warning_rate: float
    cache: CacheStats | None = None


class BrandValidationService:
    """ブランド設定のバリデーションを行うサービス。

    cacheが指定された場合、同一入力のレポートをTTLの間再利用する。
    context.extra_rulesを含む呼び出しはキャッシュを経由しない。
    """

    def __init__(
        self,
        engine: ValidationRuleEngine,
        cache: ValidationCache | None = None,
        settings: ValidatorSettings | None = None,
    ) -> None:
        self._engine = engine
        self._cache = cache
        self._settings = settings or ValidatorSettings()
        self._lock = threading.Lock()
        self._validations = 0
        self._score_total = 0
        self._error_total = 0
        self._warning_total = 0

    @property
    def engine(self) -> ValidationRuleEngine:
        return self._engine

    def validate(self, config: BrandConfig, context: ValidationContext | None = None) -> ValidationReport:
        """ブランド設定を検証する。

        Args:
            config: 検証対象のブランド設定。
            context: バリデーションコンテキスト。Noneの場合は設定のdefault_strictnessを使用する。

        Returns:
            ValidationReport。

        Raises:
            DuplicateRuleIdError: context.extra_rulesのIDが登録済みルールと重複する場合。
        """
        context = context or ValidationContext(strictness=self._settings.default_strictness)

        if self._cache is None or context.extra_rules:
            report = self._engine.validate(config, context)
        else:
            key = fingerprint(config, context, self._engine.registry_version)
            report = self._cache.get_or_compute(key, lambda: self._engine.validate(config, context))

        self._record(report)
        return report

    def quick_validate(self, config: BrandConfig) -> list[ValidationResult]:
        """relaxedで検証し、失敗したerror重大度の結果のみを返す。"""
        report = self.validate(config, ValidationContext(strictness="relaxed"))
        return self.critical_issues(report)

    def validate_preset(
        self, preset_id: str, name: str | None = None, context: ValidationContext | None = None
    ) -> ValidationReport:
        """テーマプリセットから組み立てた設定を検証する。

        Raises:
            PresetNotFoundError: プリセットが存在しない場合。
        """
        return self.validate(preset_config(preset_id, name), context)

    @staticmethod
    def critical_issues(report: ValidationReport) -> list[ValidationResult]:
        """失敗したerror重大度の結果。"""
        return [r for r in report.results if not r.passed and r.severity == "error"]

    @staticmethod
    def warnings(report: ValidationReport) -> list[ValidationResult]:
        """失敗したwarning重大度の結果。"""
        return [r for r in report.results if not r.passed and r.severity == "warning"]

    @staticmethod
    def is_wcag_compliant(report: ValidationReport, level: WcagLevel = "AA") -> bool:
        return report.wcag_compliance.for_level(level)

    def summary(self, report: ValidationReport) -> str:
        """レポートの1行サマリー。"""
        errors = len(self.critical_issues(report))
        warnings = len(self.warnings(report))
        score = f"(Score: {report.overall_score}/100)"
        if errors == 0 and warnings == 0:
            return f"Brand configuration is valid {score}"
        if errors == 0:
            return f"Brand configuration has {warnings} warning(s) {score}"
        return f"Brand configuration has {errors} error(s) and {warnings} warning(s) {score}"

    def stats(self) -> ServiceStats:
        """これまでに返したレポートの統計。"""
        with self._lock:
            total = self._validations
            if total == 0:
                stats = ServiceStats(total_validations=0, average_score=0, error_rate=0.0, warning_rate=0.0)
            else:
                stats = ServiceStats(
                    total_validations=total,
                    average_score=round(self._score_total / total),
                    error_rate=round(self._error_total / total, 2),
                    warning_rate=round(self._warning_total / total, 2),
                )
        if self._cache is not None:
            stats.cache = self._cache.stats()
        return stats

    def clear_cache(self) -> None:
        if self._cache is not None:
            self._cache.clear()
            logger.debug("Validation cache cleared")

    def _record(self, report: ValidationReport) -> None:
        errors = len(self.critical_issues(report))
        warnings = len(self.warnings(report))
        with self._lock:
            self._validations += 1
            self._score_total += report.overall_score
            self._error_total += errors
            self._warning_total += warnings


def create_validation_service(settings: ValidatorSettings | None = None) -> BrandValidationService:
    """設定からポリシー・エンジン・キャッシュを組み立ててサービスを生成する。

    Raises:
        PolicyLoadError: ポリシーファイルが不正な場合。
    """
    settings = settings or ValidatorSettings()
    policy_file = settings.resolved_policy_file()
    policy = ValidationPolicy.from_yaml(policy_file) if policy_file is not None else ValidationPolicy()

    cache = None
    if settings.cache_enabled:
        cache = ValidationCache(ttl_seconds=settings.cache_ttl_seconds, max_entries=settings.cache_max_entries)

    return BrandValidationService(ValidationRuleEngine(policy), cache=cache, settings=settings)
