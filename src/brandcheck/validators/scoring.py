"""ルール結果からカテゴリ別スコア・総合スコア・WCAG適合状況を算出する。"""

import math
from collections.abc import Iterable, Sequence
from datetime import UTC, datetime

from brandcheck.models.validation import (
    CATEGORIES,
    SCORED_CATEGORIES,
    WCAG_LEVELS,
    CategoryScores,
    CategorySummary,
    ValidationReport,
    ValidationResult,
    WcagCompliance,
)
from brandcheck.validators.policy import ValidationPolicy

_MAX_SCORE = 100


class ScoringAggregator:
    """失敗結果にカテゴリ・重大度別の減点を適用してレポートを組み立てる。"""

    def __init__(self, policy: ValidationPolicy | None = None) -> None:
        self._policy = policy or ValidationPolicy()

    def category_scores(self, results: Iterable[ValidationResult]) -> CategoryScores:
        """採点対象の4カテゴリについて、100点からの減点結果を返す。

        technicalカテゴリの結果は採点しない。各スコアは0〜100にクランプする。
        """
        scores = {category: _MAX_SCORE for category in SCORED_CATEGORIES}
        for result in results:
            if result.passed or result.category not in scores:
                continue
            penalty = self._policy.penalties.get(result.category)
            if penalty is not None:
                scores[result.category] -= getattr(penalty, result.severity)
        return CategoryScores(**{k: min(_MAX_SCORE, max(0, v)) for k, v in scores.items()})

    @staticmethod
    def overall_score(scores: CategoryScores) -> int:
        """4カテゴリの平均を四捨五入（0.5は切り上げ）した総合スコア。"""
        values = [getattr(scores, category) for category in SCORED_CATEGORIES]
        return math.floor(sum(values) / len(values) + 0.5)

    @staticmethod
    def wcag_compliance(results: Iterable[ValidationResult]) -> WcagCompliance:
        """各WCAGレベルについて、そのレベルの失敗結果が1件もなければ適合とする。"""
        failed_levels = {r.wcag_level for r in results if not r.passed and r.wcag_level is not None}
        return WcagCompliance(
            level_a="A" not in failed_levels,
            level_aa="AA" not in failed_levels,
            level_aaa="AAA" not in failed_levels,
        )

    def build_report(
        self,
        results: Sequence[ValidationResult],
        skipped_rules: Sequence[str] = (),
        timestamp: datetime | None = None,
    ) -> ValidationReport:
        """ルール結果一覧からValidationReportを生成する。

        Args:
            results: 実行順のルール結果。
            skipped_rules: 適用対象外として評価しなかったルールのID。
            timestamp: レポート生成時刻。Noneの場合は現在時刻（UTC）。

        Returns:
            集計済みのValidationReport。
        """
        category_summary = {
            category: _summarize(r for r in results if r.category == category) for category in CATEGORIES
        }
        wcag_summary = {level: _summarize(r for r in results if r.wcag_level == level) for level in WCAG_LEVELS}
        scores = self.category_scores(results)
        passed = sum(1 for r in results if r.passed)

        return ValidationReport(
            is_valid=not any(not r.passed and r.severity == "error" for r in results),
            total_checks=len(results),
            passed_checks=passed,
            failed_checks=len(results) - passed,
            results=list(results),
            category_summary=category_summary,
            wcag_summary=wcag_summary,
            scores=scores,
            overall_score=self.overall_score(scores),
            wcag_compliance=self.wcag_compliance(results),
            skipped_rules=list(skipped_rules),
            timestamp=timestamp or datetime.now(UTC),
        )


def _summarize(results: Iterable[ValidationResult]) -> CategorySummary:
    passed = failed = 0
    for result in results:
        if result.passed:
            passed += 1
        else:
            failed += 1
    return CategorySummary(passed=passed, failed=failed, total=passed + failed)
