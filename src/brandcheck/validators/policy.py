"""バリデーションのヒューリスティック定数（ポリシー）の定義と読み込み。"""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from brandcheck.models.errors import PolicyLoadError

logger = logging.getLogger(__name__)


class SeverityPenalty(BaseModel):
    """失敗結果1件あたりの減点。"""

    error: int = 0
    warning: int = 0
    info: int = 0


def _default_penalties() -> dict[str, SeverityPenalty]:
    return {
        "accessibility": SeverityPenalty(error=15, warning=10),
        "usability": SeverityPenalty(error=12, warning=8),
        "design": SeverityPenalty(error=10, warning=6),
        "branding": SeverityPenalty(error=8, warning=5),
    }


class ValidationPolicy(BaseModel):
    """採点・ルール判定に使う調整可能な定数。

    デフォルト値は既存の採点結果と一致するよう固定している。
    """

    penalties: dict[str, SeverityPenalty] = Field(default_factory=_default_penalties)
    placeholder_names: list[str] = Field(
        default_factory=lambda: [
            "Your Organization",
            "Micro App",
            "Default Brand",
            "Untitled",
            "Company Name",
        ]
    )
    generic_alt_texts: list[str] = Field(
        default_factory=lambda: ["logo", "image", "img", "icon", "picture", "graphic", "brand"]
    )
    senior_friendly_fonts: list[str] = Field(
        default_factory=lambda: ["Arial", "Helvetica", "Verdana", "Tahoma", "Calibri"]
    )
    harmony_pass_score: float = 70.0
    color_blind_min_contrast: float = 3.0
    logo_min_area: int = 400
    logo_max_area: int = 10000
    logo_max_side_difference: int = 20
    min_body_font_px: float = 16.0

    @classmethod
    def from_yaml(cls, path: Path) -> "ValidationPolicy":
        """YAMLファイルからポリシーを読み込む。記載のない項目はデフォルト値を使う。

        Raises:
            PolicyLoadError: ファイルが存在しない、またはYAML/スキーマとして不正な場合。
        """
        if not path.exists():
            raise PolicyLoadError(str(path), "file does not exist")
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise PolicyLoadError(str(path), str(e)) from e

        if not isinstance(data, dict):
            raise PolicyLoadError(str(path), "top-level YAML value must be a mapping")

        # penaltiesは部分指定を許容し、未指定カテゴリはデフォルトを維持する
        raw_penalties = data.pop("penalties", None) or {}
        if not isinstance(raw_penalties, dict):
            raise PolicyLoadError(str(path), "penalties must be a mapping")

        penalties = _default_penalties()
        try:
            for category, values in raw_penalties.items():
                penalties[category] = SeverityPenalty.model_validate(values)
            policy = cls.model_validate({**data, "penalties": penalties})
        except ValidationError as e:
            raise PolicyLoadError(str(path), str(e)) from e

        logger.info("Loaded validation policy from %s", path)
        return policy
