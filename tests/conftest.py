"""テスト共通フィクスチャ。"""

from pathlib import Path

import pytest

from brandcheck.config import ValidatorSettings
from brandcheck.models.brand import BrandColors, BrandConfig, LogoConfig, Typography
from brandcheck.services.validation import BrandValidationService
from brandcheck.validators.cache import ValidationCache
from brandcheck.validators.engine import ValidationRuleEngine
from brandcheck.validators.policy import ValidationPolicy


@pytest.fixture
def config_dir() -> Path:
    """設定ファイルディレクトリ。"""
    return Path(__file__).parent.parent / "config"


@pytest.fixture
def policy() -> ValidationPolicy:
    """デフォルト値のValidationPolicy。"""
    return ValidationPolicy()


@pytest.fixture
def engine(policy: ValidationPolicy) -> ValidationRuleEngine:
    """組み込みルールを登録済みのエンジン。"""
    return ValidationRuleEngine(policy)


@pytest.fixture
def cache() -> ValidationCache:
    """TTL 300秒のキャッシュ。"""
    return ValidationCache(ttl_seconds=300, max_entries=8)


@pytest.fixture
def settings(tmp_path: Path) -> ValidatorSettings:
    """ポリシーファイルを持たない設定。"""
    return ValidatorSettings(config_dir=tmp_path)


@pytest.fixture
def service(engine: ValidationRuleEngine, cache: ValidationCache, settings: ValidatorSettings) -> BrandValidationService:
    """キャッシュ付きのBrandValidationService。"""
    return BrandValidationService(engine, cache=cache, settings=settings)


@pytest.fixture
def brand_config() -> BrandConfig:
    """すべての組み込みルールを満たすブランド設定。"""
    return BrandConfig(
        brand_id="acme",
        name="Acme Analytics",
        app_name="Insights",
        colors=BrandColors(primary="#3B82F6"),
        typography=Typography(font_family="Inter, sans-serif"),
        logo=LogoConfig(
            alt="Acme Analytics logo",
            initials="AA",
            background_color="#1D4ED8",
            text_color="#FFFFFF",
        ),
    )
