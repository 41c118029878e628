"""brandcheckのカスタム例外クラス。"""


class BrandCheckError(Exception):
    """brandcheckの基底例外クラス。"""


class InvalidColorFormatError(BrandCheckError, ValueError):
    """16進カラー文字列として解釈できない入力を受け取った場合の例外。"""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid color format: {value!r}. Expected #RGB or #RRGGBB hex.")
        self.value = value


class DuplicateRuleIdError(BrandCheckError):
    """同じIDのルールが既に登録されている場合の例外。"""

    def __init__(self, rule_id: str) -> None:
        super().__init__(f"Validation rule already registered: {rule_id}")
        self.rule_id = rule_id


class RuleNotFoundError(BrandCheckError):
    """指定されたルールが見つからない場合の例外。"""

    def __init__(self, rule_id: str) -> None:
        super().__init__(f"Validation rule not found: {rule_id}")
        self.rule_id = rule_id


class RuleExecutionError(BrandCheckError):
    """ルールの評価中に例外が発生したことを表す。

    エンジン内部で生成・記録され、validate()の外へは送出されない。
    """

    def __init__(self, rule_id: str, cause: BaseException) -> None:
        super().__init__(f"Validation rule {rule_id} failed to execute: {cause}")
        self.rule_id = rule_id
        self.cause = cause


class ConfigurationIncompleteError(BrandCheckError):
    """テーマ生成に必要な設定項目が欠けている場合の例外。"""

    def __init__(self, missing_fields: list[str]) -> None:
        super().__init__(f"Brand configuration is missing required fields: {', '.join(missing_fields)}")
        self.missing_fields = missing_fields


class PresetNotFoundError(BrandCheckError):
    """指定されたテーマプリセットが見つからない場合の例外。"""

    def __init__(self, preset_id: str) -> None:
        super().__init__(f"Theme preset not found: {preset_id}")
        self.preset_id = preset_id


class PolicyLoadError(BrandCheckError):
    """バリデーションポリシーファイルの読み込みに失敗した場合の例外。"""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to load validation policy {path}: {reason}")
        self.path = path
        self.reason = reason
