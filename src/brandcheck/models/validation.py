"""バリデーション関連のデータモデル。"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from brandcheck.models.brand import BrandConfig

Category = Literal["accessibility", "usability", "design", "branding", "technical"]
Severity = Literal["error", "warning", "info"]
WcagLevel = Literal["A", "AA", "AAA"]
Strictness = Literal["relaxed", "standard", "strict"]

CATEGORIES: tuple[Category, ...] = ("accessibility", "usability", "design", "branding", "technical")
SCORED_CATEGORIES: tuple[Category, ...] = ("accessibility", "usability", "design", "branding")
WCAG_LEVELS: tuple[WcagLevel, ...] = ("A", "AA", "AAA")


class ValidationResult(BaseModel):
    """ルール1件分の検証結果。"""

    model_config = ConfigDict(frozen=True)

    rule_id: str
    rule_name: str = ""
    passed: bool
    severity: Severity
    message: str
    suggestion: str | None = None
    category: Category
    wcag_level: WcagLevel | None = None
    path: str | None = None


class ValidationRule(ABC):
    """ブランド設定に対するバリデーションルール。

    サブクラスはクラス属性でメタデータを宣言し、evaluate()を実装する。
    evaluate()は純粋かつ高速であること。エンジンは例外の隔離のみを行う。

    Usage:

        class NoEmptyName(ValidationRule):
            id = "no-empty-name"
            name = "Name Present"
            category = "branding"
            severity = "error"

            def evaluate(self, config, context):
                return self.result(bool(config.name.strip()), "Brand name checked")
    """

    id: str
    name: str
    description: str = ""
    category: Category
    severity: Severity
    wcag_level: WcagLevel | None = None
    path: str | None = None
    enabled: bool = True

    def applies(self, config: BrandConfig, context: ValidationContext) -> bool:
        """このルールを評価できるかどうか。Falseの場合は評価・集計から除外される。"""
        return True

    @abstractmethod
    def evaluate(self, config: BrandConfig, context: ValidationContext) -> ValidationResult:
        """ブランド設定を検証して結果を返す。"""

    def result(
        self,
        passed: bool,
        message: str,
        suggestion: str | None = None,
        *,
        wcag_level: WcagLevel | None = None,
    ) -> ValidationResult:
        """ルールのメタデータを埋めたValidationResultを生成する。"""
        return ValidationResult(
            rule_id=self.id,
            rule_name=self.name,
            passed=passed,
            severity=self.severity,
            message=message,
            suggestion=suggestion,
            category=self.category,
            wcag_level=wcag_level or self.wcag_level,
            path=self.path,
        )


class ValidationContext(BaseModel):
    """バリデーション実行時のコンテキスト。"""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    strictness: Strictness = "standard"
    tenant_id: str | None = None
    industry: str | None = None
    audience: str | None = None
    extra_rules: list[ValidationRule] = Field(default_factory=list)


class CategorySummary(BaseModel):
    """カテゴリ（またはWCAGレベル）ごとの件数集計。"""

    model_config = ConfigDict(frozen=True)

    passed: int = 0
    failed: int = 0
    total: int = 0


class CategoryScores(BaseModel):
    """採点対象カテゴリごとのスコア(0〜100)。"""

    model_config = ConfigDict(frozen=True)

    accessibility: int = 100
    usability: int = 100
    design: int = 100
    branding: int = 100


class WcagCompliance(BaseModel):
    """WCAGレベルごとの適合可否。"""

    model_config = ConfigDict(frozen=True)

    level_a: bool = True
    level_aa: bool = True
    level_aaa: bool = True

    def for_level(self, level: WcagLevel) -> bool:
        return {"A": self.level_a, "AA": self.level_aa, "AAA": self.level_aaa}[level]


class ValidationReport(BaseModel):
    """1回のバリデーション実行の集計レポート。"""

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    total_checks: int
    passed_checks: int
    failed_checks: int
    results: list[ValidationResult]
    category_summary: dict[Category, CategorySummary]
    wcag_summary: dict[WcagLevel, CategorySummary]
    scores: CategoryScores
    overall_score: int
    wcag_compliance: WcagCompliance
    skipped_rules: list[str] = Field(default_factory=list)
    timestamp: datetime

    def failures(self) -> list[ValidationResult]:
        return [r for r in self.results if not r.passed]

    def result_for(self, rule_id: str) -> ValidationResult | None:
        """指定ルールの結果を返す。評価されていない場合はNone。"""
        for result in self.results:
            if result.rule_id == rule_id:
                return result
        return None
