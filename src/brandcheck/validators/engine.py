"""ルールレジストリに基づくブランド設定のバリデーションエンジン。"""

import logging
import threading

from brandcheck.models.brand import BrandConfig
from brandcheck.models.errors import DuplicateRuleIdError, RuleExecutionError, RuleNotFoundError
from brandcheck.models.validation import ValidationContext, ValidationReport, ValidationResult, ValidationRule
from brandcheck.validators.policy import ValidationPolicy
from brandcheck.validators.rules import builtin_rules
from brandcheck.validators.scoring import ScoringAggregator

logger = logging.getLogger(__name__)


class ValidationRuleEngine:
    """組み込みルールとカスタムルールを登録順に実行し、レポートを生成する。

    レジストリはRLockで保護され、validate()は呼び出し時点のスナップショットに
    対して実行される。ルールは純粋かつ高速であることを前提とし、エンジンは
    ルール単位の例外隔離のみを行う。
    """

    def __init__(
        self,
        policy: ValidationPolicy | None = None,
        aggregator: ScoringAggregator | None = None,
        include_builtins: bool = True,
    ) -> None:
        self._policy = policy or ValidationPolicy()
        self._aggregator = aggregator or ScoringAggregator(self._policy)
        self._lock = threading.RLock()
        self._rules: dict[str, ValidationRule] = {}
        self._builtin_ids: frozenset[str] = frozenset()
        # 有効・無効はエンジンごとに保持し、ルールインスタンスは変更しない
        self._disabled: set[str] = set()
        self._version = 0

        if include_builtins:
            builtins = builtin_rules(self._policy)
            for rule in builtins:
                self._rules[rule.id] = rule
                if not rule.enabled:
                    self._disabled.add(rule.id)
            self._builtin_ids = frozenset(rule.id for rule in builtins)

    @property
    def policy(self) -> ValidationPolicy:
        return self._policy

    @property
    def registry_version(self) -> int:
        """レジストリが変更されるたびに増加するカウンタ。"""
        with self._lock:
            return self._version

    def rules(self) -> list[ValidationRule]:
        """登録済みルールを実行順に返す。"""
        with self._lock:
            return list(self._rules.values())

    def get_rule(self, rule_id: str) -> ValidationRule:
        """IDでルールを取得する。

        Raises:
            RuleNotFoundError: ルールが登録されていない場合。
        """
        with self._lock:
            rule = self._rules.get(rule_id)
        if rule is None:
            raise RuleNotFoundError(rule_id)
        return rule

    def add_custom_rule(self, rule: ValidationRule) -> None:
        """カスタムルールを末尾に登録する。

        Raises:
            DuplicateRuleIdError: 同じIDのルールが既に登録されている場合。
        """
        with self._lock:
            if rule.id in self._rules:
                raise DuplicateRuleIdError(rule.id)
            self._rules[rule.id] = rule
            if not rule.enabled:
                self._disabled.add(rule.id)
            self._version += 1
        logger.debug("Registered custom validation rule %s", rule.id)

    def remove_custom_rule(self, rule_id: str) -> bool:
        """カスタムルールを削除する。組み込みルールは削除できない（無効化を使う）。

        Returns:
            削除した場合True、該当するカスタムルールがない場合False。
        """
        with self._lock:
            if rule_id in self._builtin_ids or rule_id not in self._rules:
                return False
            del self._rules[rule_id]
            self._disabled.discard(rule_id)
            self._version += 1
        logger.debug("Removed custom validation rule %s", rule_id)
        return True

    def is_rule_enabled(self, rule_id: str) -> bool:
        """このエンジンでルールが有効かどうか。

        Raises:
            RuleNotFoundError: ルールが登録されていない場合。
        """
        with self._lock:
            if rule_id not in self._rules:
                raise RuleNotFoundError(rule_id)
            return rule_id not in self._disabled

    def set_rule_enabled(self, rule_id: str, enabled: bool) -> None:
        """このエンジンでのルールの有効・無効を切り替える。

        状態はエンジンごとに保持されるため、同じルールインスタンスを
        登録した他のエンジンには影響しない。

        Raises:
            RuleNotFoundError: ルールが登録されていない場合。
        """
        with self._lock:
            if rule_id not in self._rules:
                raise RuleNotFoundError(rule_id)
            if (rule_id not in self._disabled) == enabled:
                return
            if enabled:
                self._disabled.discard(rule_id)
            else:
                self._disabled.add(rule_id)
            self._version += 1

    def validate(self, config: BrandConfig, context: ValidationContext | None = None) -> ValidationReport:
        """有効なルールをすべて1回ずつ登録順に実行し、集計レポートを返す。

        context.extra_rulesはレジストリのルールの後に、この呼び出しでのみ実行される。
        ルール内で発生した例外はtechnicalカテゴリの失敗結果に変換され、送出されない。

        Args:
            config: 検証対象のブランド設定。
            context: バリデーションコンテキスト。Noneの場合はstandard。

        Returns:
            ValidationReport。

        Raises:
            DuplicateRuleIdError: extra_rulesのIDが登録済みルールまたは互いに重複する場合。
        """
        context = context or ValidationContext()
        rules = self._rules_for_call(context)

        results: list[ValidationResult] = []
        skipped: list[str] = []
        for rule in rules:
            result = self._run_rule(rule, config, context)
            if result is None:
                skipped.append(rule.id)
            else:
                results.append(result)

        return self._aggregator.build_report(results, skipped_rules=skipped)

    def _rules_for_call(self, context: ValidationContext) -> list[ValidationRule]:
        """この呼び出しで実行する有効なルールを実行順に返す。"""
        with self._lock:
            rules = [rule for rule_id, rule in self._rules.items() if rule_id not in self._disabled]
            seen = set(self._rules)
        for rule in context.extra_rules:
            if rule.id in seen:
                raise DuplicateRuleIdError(rule.id)
            seen.add(rule.id)
            if rule.enabled:
                rules.append(rule)
        return rules

    @staticmethod
    def _run_rule(
        rule: ValidationRule, config: BrandConfig, context: ValidationContext
    ) -> ValidationResult | None:
        """1ルールを実行する。適用対象外の場合はNone。"""
        try:
            if not rule.applies(config, context):
                return None
            result = rule.evaluate(config, context)
            if not isinstance(result, ValidationResult):
                raise TypeError(f"evaluate() returned {type(result).__name__}, expected ValidationResult")
            return result
        except Exception as e:
            error = RuleExecutionError(rule.id, e)
            logger.warning("%s", error, exc_info=e)
            return ValidationResult(
                rule_id=rule.id,
                rule_name=getattr(rule, "name", rule.id),
                passed=False,
                severity="warning",
                message=f"Rule '{getattr(rule, 'name', rule.id)}' failed to execute: {type(e).__name__}: {e}",
                suggestion="Check the rule implementation",
                category="technical",
            )
