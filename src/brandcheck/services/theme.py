"""ブランド設定からデザイントークン・CSS変数・テーマCSSを生成するサービス。"""

import logging
from itertools import combinations

from brandcheck.color.contrast import contrast_ratio
from brandcheck.color.convert import hex_to_hsl
from brandcheck.color.harmony import harmony_score
from brandcheck.color.scale import generate_scale
from brandcheck.models.brand import BrandColors, BrandConfig, LogoConfig, Typography
from brandcheck.models.color import ColorScale
from brandcheck.models.errors import ConfigurationIncompleteError, PresetNotFoundError
from brandcheck.models.theme import (
    AccessibilityConfig,
    BorderTokens,
    DesignTokens,
    GeneratedTheme,
    ResponsiveConfig,
    SemanticColors,
    ThemeColors,
    ThemePreset,
    ThemeValidation,
    TypographyTokens,
)

logger = logging.getLogger(__name__)

# 未設定ロールのデフォルト色
_DEFAULT_ROLE_COLORS: dict[str, str] = {
    "neutral": "#6B7280",
    "success": "#10B981",
    "warning": "#F59E0B",
    "error": "#EF4444",
    "info": "#3B82F6",
}

_DEFAULT_FONT_FAMILY = "ui-sans-serif, system-ui, sans-serif"
_MONO_FONT_FAMILY = (
    'ui-monospace, SFMono-Regular, "SF Mono", Monaco, Consolas, "Liberation Mono", "Courier New", monospace'
)

_LETTER_SPACING: dict[str, str] = {
    "tighter": "-0.05em",
    "tight": "-0.025em",
    "normal": "0em",
    "wide": "0.025em",
    "wider": "0.05em",
    "widest": "0.1em",
}

# 1単位 = 0.25rem
_SPACING_UNIT_REM = 0.25
_SPACING_STEPS: tuple[float, ...] = (
    0.5, 1, 1.5, 2, 2.5, 3, 3.5, 4, 5, 6, 7, 8, 9, 10, 11, 12,
    14, 16, 20, 24, 28, 32, 36, 40, 44, 48, 52, 56, 60, 64, 72, 80, 96,
)  # fmt: skip

_BORDER_RADIUS: dict[str, str] = {
    "none": "0px",
    "sm": "0.125rem",
    "default": "0.25rem",
    "md": "0.375rem",
    "lg": "0.5rem",
    "xl": "0.75rem",
    "2xl": "1rem",
    "3xl": "1.5rem",
    "full": "9999px",
}

_BORDER_WIDTH: dict[str, str] = {"0": "0px", "1": "1px", "2": "2px", "4": "4px", "8": "8px"}

_ANIMATIONS: dict[str, str] = {
    "fade-in": "fadeIn 0.5s ease-in-out",
    "fade-out": "fadeOut 0.5s ease-in-out",
    "slide-up": "slideUp 0.3s ease-out",
    "slide-down": "slideDown 0.3s ease-out",
    "bounce": "bounce 1s infinite",
    "pulse": "pulse 2s cubic-bezier(0.4, 0, 0.6, 1) infinite",
}

_BREAKPOINTS: dict[str, str] = {
    "sm": "640px",
    "md": "768px",
    "lg": "1024px",
    "xl": "1280px",
    "2xl": "1536px",
}

_FLUID_TYPOGRAPHY: dict[str, str] = {
    "text-xs": "clamp(0.75rem, 0.7rem + 0.25vw, 0.875rem)",
    "text-sm": "clamp(0.875rem, 0.8rem + 0.375vw, 1rem)",
    "text-base": "clamp(1rem, 0.9rem + 0.5vw, 1.125rem)",
    "text-lg": "clamp(1.125rem, 1rem + 0.625vw, 1.25rem)",
    "text-xl": "clamp(1.25rem, 1.1rem + 0.75vw, 1.5rem)",
}

_DEVICE_SPACING_MULTIPLIERS: dict[str, float] = {"mobile": 0.8, "tablet": 0.9, "desktop": 1.0}

# validate_theme: 白背景に対する最小コントラスト比と減点
_MIN_WHITE_CONTRAST = 4.5
_LOW_CONTRAST_PENALTY = 10
_COLOR_BLIND_PENALTY = 15
_ACCESSIBLE_READABILITY = 90
_HARMONY_RECOMMEND_BELOW = 70.0
_COLOR_BLIND_MIN_CONTRAST = 3.0

PRESETS: dict[str, ThemePreset] = {
    preset.id: preset
    for preset in (
        ThemePreset(
            id="minimal-modern",
            name="Minimal Modern",
            description="Clean, minimal design with modern typography",
            primary="#000000",
            secondary="#6B7280",
            accent="#3B82F6",
            style="minimal",
            industry="universal",
        ),
        ThemePreset(
            id="vibrant-tech",
            name="Vibrant Tech",
            description="Bold, energetic design for tech companies",
            primary="#8B5CF6",
            secondary="#06B6D4",
            accent="#F59E0B",
            style="bold",
            industry="tech-saas",
        ),
        ThemePreset(
            id="professional-blue",
            name="Professional Blue",
            description="Classic professional theme with blue tones",
            primary="#1E40AF",
            secondary="#64748B",
            accent="#0EA5E9",
            style="classic",
            industry="professional-services",
        ),
        ThemePreset(
            id="healthcare-calm",
            name="Healthcare Calm",
            description="Soothing, trustworthy design for healthcare",
            primary="#10B981",
            secondary="#6B7280",
            accent="#06B6D4",
            style="elegant",
            industry="healthcare",
        ),
    )
}


def get_preset(preset_id: str) -> ThemePreset:
    """IDでプリセットを取得する。

    Raises:
        PresetNotFoundError: プリセットが存在しない場合。
    """
    preset = PRESETS.get(preset_id)
    if preset is None:
        raise PresetNotFoundError(preset_id)
    return preset


def preset_config(preset_id: str, name: str | None = None) -> BrandConfig:
    """プリセットのベースカラーからBrandConfigを組み立てる。

    Raises:
        PresetNotFoundError: プリセットが存在しない場合。
    """
    preset = get_preset(preset_id)
    brand_name = name or preset.name
    initials = "".join(word[0] for word in brand_name.split())[:3].upper()
    return BrandConfig(
        brand_id=f"preset-{preset.id}",
        name=brand_name,
        app_name=preset.name.split()[0],
        description=preset.description,
        logo=LogoConfig(alt=f"{brand_name} logo", initials=initials),
        colors=BrandColors(
            primary=preset.primary,
            secondary=preset.secondary,
            accent=preset.accent,
            **_DEFAULT_ROLE_COLORS,
        ),
        typography=Typography(font_family="Inter, sans-serif"),
    )


def _format_rem(value: float) -> str:
    return f"{round(value, 4):g}rem"


def _step_key(step: float) -> str:
    return f"{step:g}"


def spacing_scale(multiplier: float = 1.0) -> dict[str, str]:
    """0.25remを1単位とするスペーシングスケール。"""
    base = _SPACING_UNIT_REM * multiplier
    scale = {"0": "0px", "px": "1px"}
    for step in _SPACING_STEPS:
        scale[_step_key(step)] = _format_rem(base * step)
    return scale


def _shadow_scale(neutral: ColorScale) -> dict[str, str]:
    shade = neutral[900]
    return {
        "sm": f"0 1px 2px 0 {shade}1A",
        "default": f"0 1px 3px 0 {shade}1A, 0 1px 2px -1px {shade}1A",
        "md": f"0 4px 6px -1px {shade}1A, 0 2px 4px -2px {shade}1A",
        "lg": f"0 10px 15px -3px {shade}1A, 0 4px 6px -4px {shade}1A",
        "xl": f"0 20px 25px -5px {shade}1A, 0 8px 10px -6px {shade}1A",
        "2xl": f"0 25px 50px -12px {shade}40",
        "inner": f"inset 0 2px 4px 0 {shade}0D",
        "none": "0 0 #0000",
    }


def _css_name(name: str) -> str:
    # 「0.5」などのドットはカスタムプロパティ名でエスケープが必要
    return name.replace(".", "\\.")


def _css_string(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


class ThemeGenerator:
    """BrandConfigからGeneratedThemeを生成する。

    ステートレスであり、複数スレッドから共有して使用できる。
    """

    def generate_theme(self, config: BrandConfig, include_animations: bool = True) -> GeneratedTheme:
        """ブランド設定からテーマを生成する。

        Args:
            config: ブランド設定。colors.primaryは必須。
            include_animations: アニメーショントークンを含めるかどうか。

        Returns:
            生成したGeneratedTheme。

        Raises:
            ConfigurationIncompleteError: colors.primaryが未設定の場合。
            InvalidColorFormatError: 色が16進カラーとして解釈できない場合。
        """
        colors = config.colors
        if not colors.primary:
            raise ConfigurationIncompleteError(["colors.primary"])

        theme_colors = self._theme_colors(colors)
        tokens = DesignTokens(
            colors=theme_colors,
            typography=self._typography_tokens(config.typography),
            spacing=spacing_scale(),
            shadows=_shadow_scale(theme_colors.neutral),
            borders=BorderTokens(radius=dict(_BORDER_RADIUS), width=dict(_BORDER_WIDTH)),
            animations=dict(_ANIMATIONS) if include_animations else {},
        )

        theme = GeneratedTheme(
            id=f"theme-{config.brand_id}",
            name=f"{config.name or config.brand_id} Theme",
            design_tokens=tokens,
            css_variables=self._css_variables(tokens, config),
            accessibility=self._accessibility_config(config, theme_colors),
            responsive=ResponsiveConfig(
                breakpoints=dict(_BREAKPOINTS),
                container_sizes=dict(_BREAKPOINTS),
                fluid_typography=dict(_FLUID_TYPOGRAPHY),
                spacing_scales={
                    device: spacing_scale(multiplier) for device, multiplier in _DEVICE_SPACING_MULTIPLIERS.items()
                },
            ),
        )
        logger.debug("Generated theme %s (%d CSS variables)", theme.id, len(theme.css_variables))
        return theme

    def generate_theme_from_preset(self, preset_id: str, name: str | None = None) -> GeneratedTheme:
        """プリセットからテーマを生成する。

        Raises:
            PresetNotFoundError: プリセットが存在しない場合。
        """
        return self.generate_theme(preset_config(preset_id, name))

    def validate_theme(self, theme: GeneratedTheme) -> ThemeValidation:
        """生成テーマのコントラスト・色覚配慮・色の調和を評価する。"""
        issues: list[str] = []
        recommendations: list[str] = []
        readability = 100

        for key, ratio in theme.accessibility.contrast_ratios.items():
            if key.endswith("-white") and ratio < _MIN_WHITE_CONTRAST:
                issues.append(f"Low contrast ratio for {key}: {ratio:.2f}")
                readability -= _LOW_CONTRAST_PENALTY

        if not theme.accessibility.color_blind_safe:
            issues.append("Color palette may not be safe for color blind users")
            readability -= _COLOR_BLIND_PENALTY

        palette = theme.design_tokens.colors
        hues = [hex_to_hsl(scale[500]).h for scale in (palette.primary, palette.secondary, palette.accent)]
        harmony = 100.0
        score = harmony_score(hues)
        if score < _HARMONY_RECOMMEND_BELOW:
            harmony = score
            recommendations.append("Consider adjusting color relationships for better harmony")

        if readability < _ACCESSIBLE_READABILITY:
            recommendations.append("Improve color contrast for better accessibility")
        if not theme.design_tokens.animations:
            recommendations.append("Consider adding subtle animations for better user experience")

        return ThemeValidation(
            is_accessible=not issues and readability >= _ACCESSIBLE_READABILITY,
            contrast_issues=issues,
            readability_score=max(0, readability),
            color_harmony_score=max(0.0, harmony),
            recommendations=recommendations,
        )

    def export_css(self, theme: GeneratedTheme) -> str:
        """テーマをCSS（:root変数・ユーティリティクラス・メディアクエリ）として出力する。"""
        lines = [":root {"]
        lines.extend(f"  {name}: {value};" for name, value in theme.css_variables.items())
        lines.extend(["}", "", "/* Utility Classes */"])

        for role, scale in theme.design_tokens.colors.by_role().items():
            for stop, value in scale.items():
                lines.append(f".text-{role}-{stop} {{ color: {value}; }}")
                lines.append(f".bg-{role}-{stop} {{ background-color: {value}; }}")
                lines.append(f".border-{role}-{stop} {{ border-color: {value}; }}")

        high_contrast = theme.accessibility.high_contrast_mode
        lines.extend(
            [
                "",
                "/* Accessibility Styles */",
                "@media (prefers-reduced-motion: reduce) {",
                "  *, *::before, *::after {",
                "    animation-duration: 0.01ms !important;",
                "    animation-iteration-count: 1 !important;",
                "    transition-duration: 0.01ms !important;",
                "  }",
                "}",
                "",
                "@media (prefers-contrast: more) {",
                "  :root {",
                *(f"    --hc-{name}: {value};" for name, value in high_contrast.items()),
                "  }",
                "}",
                "",
                ".focus-visible {",
                f"  outline: {theme.accessibility.focus_indicators['focus-outline']};",
                f"  outline-offset: {theme.accessibility.focus_indicators['focus-offset']};",
                "}",
                "",
                "/* Responsive Styles */",
            ]
        )

        containers = theme.responsive.container_sizes
        for name, size in theme.responsive.breakpoints.items():
            lines.append(f"@media (min-width: {size}) {{")
            lines.append(f"  .container {{ max-width: {containers.get(name, size)}; }}")
            lines.append("}")
        return "\n".join(lines) + "\n"

    @staticmethod
    def _theme_colors(colors: BrandColors) -> ThemeColors:
        primary = colors.primary or ""

        def role_scale(role: str) -> ColorScale:
            return generate_scale(getattr(colors, role) or _DEFAULT_ROLE_COLORS[role])

        return ThemeColors(
            primary=generate_scale(primary),
            secondary=generate_scale(colors.secondary or primary),
            accent=generate_scale(colors.accent or primary),
            neutral=role_scale("neutral"),
            semantic=SemanticColors(
                success=role_scale("success"),
                warning=role_scale("warning"),
                error=role_scale("error"),
                info=role_scale("info"),
            ),
        )

    @staticmethod
    def _typography_tokens(typography: Typography) -> TypographyTokens:
        return TypographyTokens(
            font_families={
                "primary": typography.font_family or _DEFAULT_FONT_FAMILY,
                "secondary": typography.secondary_font_family,
                "mono": _MONO_FONT_FAMILY,
            },
            font_sizes=dict(typography.font_sizes),
            font_weights={
                "thin": 100,
                "light": 300,
                "normal": typography.body_font_weight,
                "medium": 500,
                "semibold": 600,
                "bold": typography.heading_font_weight,
                "extrabold": 800,
                "black": 900,
            },
            line_heights=dict(typography.line_heights),
            letter_spacing=dict(_LETTER_SPACING),
        )

    @staticmethod
    def _css_variables(tokens: DesignTokens, config: BrandConfig) -> dict[str, str]:
        variables: dict[str, str] = {}
        for role, scale in tokens.colors.by_role().items():
            for stop, value in scale.items():
                variables[f"--color-{role}-{stop}"] = value

        typography = tokens.typography
        for name, family in typography.font_families.items():
            variables[f"--font-{name}"] = family
        for name, size in typography.font_sizes.items():
            variables[f"--text-{name}"] = size
        for name, weight in typography.font_weights.items():
            variables[f"--font-weight-{name}"] = str(weight)
        for name, height in typography.line_heights.items():
            variables[f"--leading-{name}"] = height
        for step, size in tokens.spacing.items():
            variables[f"--spacing-{_css_name(step)}"] = size
        for name, shadow in tokens.shadows.items():
            variables[f"--shadow-{name}"] = shadow
        for name, radius in tokens.borders.radius.items():
            variables[f"--radius-{name}"] = radius

        variables["--brand-company-name"] = _css_string(config.name or config.brand_id)
        return variables

    @staticmethod
    def _accessibility_config(config: BrandConfig, theme_colors: ThemeColors) -> AccessibilityConfig:
        ratios: dict[str, float] = {}
        for role, scale in theme_colors.by_role().items():
            for stop, value in scale.items():
                ratios[f"{role}-{stop}-white"] = contrast_ratio(value, "#FFFFFF")
                ratios[f"{role}-{stop}-black"] = contrast_ratio(value, "#000000")

        primary = theme_colors.primary[500]
        # 色覚配慮は明示的に設定されたブランドカラー同士で判定する
        palette = config.colors.brand_palette()
        color_blind_safe = all(
            contrast_ratio(a, b) >= _COLOR_BLIND_MIN_CONTRAST for a, b in combinations(palette, 2)
        )

        return AccessibilityConfig(
            contrast_ratios=ratios,
            focus_indicators={
                "focus-ring": f"0 0 0 2px {primary}",
                "focus-outline": f"2px solid {primary}",
                "focus-offset": "2px",
            },
            color_blind_safe=color_blind_safe,
            high_contrast_mode={
                "bg-primary": "#000000",
                "text-primary": "#FFFFFF",
                "border-primary": "#FFFFFF",
            },
            reduced_motion={"transition-none": "none", "animate-none": "none"},
        )
