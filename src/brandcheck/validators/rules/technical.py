"""設定の完全性・形式に関する組み込みルール。"""

from brandcheck.color.convert import is_valid_hex
from brandcheck.models.brand import BrandConfig
from brandcheck.models.validation import ValidationContext, ValidationResult
from brandcheck.validators.rules.base import PolicyRule


class ConfigurationCompletenessRule(PolicyRule):
    """必須項目の欠落を通常の失敗結果として報告する。"""

    id = "configuration-completeness"
    name = "Configuration Completeness"
    description = "Required brand configuration fields must be present"
    category = "technical"
    severity = "error"

    def evaluate(self, config: BrandConfig, context: ValidationContext) -> ValidationResult:
        missing: list[str] = []
        if not config.name.strip():
            missing.append("name")
        if not config.colors.primary:
            missing.append("colors.primary")

        if missing:
            return self.result(
                False,
                "Brand configuration is incomplete; missing: " + ", ".join(missing),
                "Provide a brand name and a primary color",
            )
        return self.result(True, "All required fields are present")


class ColorFormatRule(PolicyRule):
    """設定されたすべての色が16進カラーとして解釈できるか。"""

    id = "color-format"
    name = "Color Format"
    description = "Configured colors must be #RGB or #RRGGBB hex strings"
    category = "technical"
    severity = "error"
    path = "colors"

    def evaluate(self, config: BrandConfig, context: ValidationContext) -> ValidationResult:
        fields = {f"colors.{role}": value for role, value in config.colors.configured().items()}
        fields["logo.text_color"] = config.logo.text_color
        if config.logo.background_color:
            fields["logo.background_color"] = config.logo.background_color

        invalid = [path for path, value in fields.items() if not is_valid_hex(value)]
        if invalid:
            return self.result(
                False,
                "Invalid color values: " + ", ".join(invalid),
                "Use #RGB or #RRGGBB hex notation for every color",
            )
        return self.result(True, f"All {len(fields)} configured colors are valid hex values")
