"""brandcheckの設定管理。"""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings

_PACKAGE_ROOT = Path(__file__).parent
_REPO_ROOT = _PACKAGE_ROOT.parent.parent


class ValidatorSettings(BaseSettings):
    """バリデーション設定。環境変数から読み込み可能。"""

    model_config = {"env_prefix": "BRANDCHECK_"}

    config_dir: Path = _REPO_ROOT / "config"
    # Noneの場合はconfig_dir/validation-policy.yamlがあれば使用する
    policy_file: Path | None = None

    # レポートキャッシュ
    cache_enabled: bool = True
    cache_ttl_seconds: float = 300.0
    cache_max_entries: int = 256

    default_strictness: Literal["relaxed", "standard", "strict"] = "standard"

    def resolved_policy_file(self) -> Path | None:
        """使用するポリシーファイルのパス。存在しない場合はNone。"""
        if self.policy_file is not None:
            return self.policy_file
        candidate = self.config_dir / "validation-policy.yaml"
        return candidate if candidate.exists() else None
