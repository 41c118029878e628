"""生成テーマ（デザイントークン）関連のデータモデル。"""

from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, Field

from brandcheck.models.color import ColorScale


class SemanticColors(BaseModel):
    """状態表示用カラーのスケール。"""

    success: ColorScale
    warning: ColorScale
    error: ColorScale
    info: ColorScale


class ThemeColors(BaseModel):
    """ロールごとのカラースケール。"""

    primary: ColorScale
    secondary: ColorScale
    accent: ColorScale
    neutral: ColorScale
    semantic: SemanticColors

    def by_role(self) -> dict[str, ColorScale]:
        """ロール名→スケールのフラットな辞書（semanticを展開）。"""
        return {
            "primary": self.primary,
            "secondary": self.secondary,
            "accent": self.accent,
            "neutral": self.neutral,
            "success": self.semantic.success,
            "warning": self.semantic.warning,
            "error": self.semantic.error,
            "info": self.semantic.info,
        }


class TypographyTokens(BaseModel):
    font_families: dict[str, str]
    font_sizes: dict[str, str]
    font_weights: dict[str, int]
    line_heights: dict[str, str]
    letter_spacing: dict[str, str]


class BorderTokens(BaseModel):
    radius: dict[str, str]
    width: dict[str, str]


class DesignTokens(BaseModel):
    """テーマを構成するデザイントークン一式。"""

    colors: ThemeColors
    typography: TypographyTokens
    spacing: dict[str, str]
    shadows: dict[str, str]
    borders: BorderTokens
    animations: dict[str, str] = Field(default_factory=dict)


class AccessibilityConfig(BaseModel):
    """アクセシビリティ関連の派生設定。"""

    contrast_ratios: dict[str, float]
    focus_indicators: dict[str, str]
    color_blind_safe: bool
    high_contrast_mode: dict[str, str]
    reduced_motion: dict[str, str]


class ResponsiveConfig(BaseModel):
    breakpoints: dict[str, str]
    container_sizes: dict[str, str]
    fluid_typography: dict[str, str]
    spacing_scales: dict[str, dict[str, str]]


class GeneratedTheme(BaseModel):
    """ブランド設定から生成されたテーマ。"""

    id: str
    name: str
    design_tokens: DesignTokens
    css_variables: dict[str, str]
    accessibility: AccessibilityConfig
    responsive: ResponsiveConfig
    generated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class ThemeValidation(BaseModel):
    """生成テーマの品質チェック結果。"""

    is_accessible: bool
    contrast_issues: list[str]
    readability_score: int
    color_harmony_score: float
    recommendations: list[str]


class ThemePreset(BaseModel):
    """ベースカラーとスタイルのプリセット。"""

    id: str
    name: str
    description: str
    primary: str
    secondary: str
    accent: str
    style: Literal["minimal", "modern", "classic", "bold", "elegant"]
    industry: str
