"""ブランド設定関連のデータモデル。"""

from pydantic import BaseModel, Field

# Tailwind準拠のデフォルト文字サイズ
_DEFAULT_FONT_SIZES: dict[str, str] = {
    "xs": "0.75rem",
    "sm": "0.875rem",
    "base": "1rem",
    "lg": "1.125rem",
    "xl": "1.25rem",
    "2xl": "1.5rem",
    "3xl": "1.875rem",
    "4xl": "2.25rem",
    "5xl": "3rem",
}

_DEFAULT_LINE_HEIGHTS: dict[str, str] = {
    "tight": "1.25",
    "normal": "1.5",
    "relaxed": "1.75",
}


class BrandColors(BaseModel):
    """ブランドカラー。値は上流から渡された16進文字列をそのまま保持する。"""

    primary: str | None = None
    secondary: str | None = None
    accent: str | None = None
    neutral: str | None = None
    success: str | None = None
    warning: str | None = None
    error: str | None = None
    info: str | None = None

    def brand_palette(self) -> list[str]:
        """設定済みのprimary/secondary/accentを順に返す。"""
        return [c for c in (self.primary, self.secondary, self.accent) if c]

    def configured(self) -> dict[str, str]:
        """設定済みのロール名と色の対応を返す。"""
        return {role: value for role, value in self.model_dump().items() if value}


class Typography(BaseModel):
    """タイポグラフィ設定。"""

    font_family: str | None = None
    secondary_font_family: str = "Georgia, serif"
    heading_font_weight: int = 600
    body_font_weight: int = 400
    font_weights: list[int] = Field(default_factory=lambda: [400, 500, 600, 700])
    font_sizes: dict[str, str] = Field(default_factory=lambda: dict(_DEFAULT_FONT_SIZES))
    line_heights: dict[str, str] = Field(default_factory=lambda: dict(_DEFAULT_LINE_HEIGHTS))


class LogoConfig(BaseModel):
    """ロゴのメタデータ（アセット解決済み）。

    background_colorが表示用背景の実際の色。gradientは表示用のクラス文字列で、
    色の算出には使用しない。
    """

    src: str = ""
    alt: str = ""
    width: int = 40
    height: int = 40
    initials: str = ""
    background_color: str | None = None
    gradient: str | None = None
    text_color: str = "#FFFFFF"


class BrandConfig(BaseModel):
    """テナント単位のブランド設定。"""

    brand_id: str
    name: str = ""
    app_name: str = ""
    description: str = ""
    colors: BrandColors = Field(default_factory=BrandColors)
    typography: Typography = Field(default_factory=Typography)
    logo: LogoConfig = Field(default_factory=LogoConfig)

    def logo_background(self) -> str | None:
        """ロゴ背景色。未設定の場合はprimaryを使用する。"""
        return self.logo.background_color or self.colors.primary
