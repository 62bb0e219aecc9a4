"""Config 설정 검증 테스트"""

import pytest
from pydantic import ValidationError

from app.core.config import Settings

VALID_KEY = "valid-internal-api-key-with-32-characters"


class TestDevelopmentConfig:
    """개발 환경 설정 테스트"""

    def test_development_allows_default_keys(self):
        """개발 환경에서는 기본 키 허용"""
        config = Settings(
            app_env="development",
            internal_api_key="your-internal-api-key-here",
        )
        assert config.is_development
        assert config.internal_api_key == "your-internal-api-key-here"

    def test_listing_defaults(self):
        """목록/랭킹 기본값"""
        config = Settings(app_env="development")

        assert config.storage_timeout_seconds == 5.0
        assert config.default_page_limit == 10
        assert config.ranking_default_amount == 5
        assert config.ranking_max_amount == 50
        assert config.default_category_id == 1

    def test_cors_origins_from_comma_string(self):
        config = Settings(cors_origins="http://a.com, http://b.com")

        assert config.cors_origins == ["http://a.com", "http://b.com"]


class TestListingConfig:
    """목록/랭킹 설정 검증 테스트"""

    def test_rejects_non_positive_timeout(self):
        with pytest.raises(ValidationError) as exc_info:
            Settings(storage_timeout_seconds=0)

        assert "STORAGE_TIMEOUT_SECONDS" in str(exc_info.value)

    def test_rejects_default_amount_above_max(self):
        with pytest.raises(ValidationError) as exc_info:
            Settings(ranking_default_amount=60, ranking_max_amount=50)

        assert "RANKING_DEFAULT_AMOUNT" in str(exc_info.value)

    def test_rejects_zero_default_amount(self):
        with pytest.raises(ValidationError):
            Settings(ranking_default_amount=0)


class TestProductionConfig:
    """프로덕션 환경 설정 검증 테스트"""

    def test_production_rejects_default_internal_api_key(self):
        """프로덕션에서 기본 Internal API Key 거부"""
        with pytest.raises(ValidationError) as exc_info:
            Settings(
                app_env="production",
                debug=False,
                internal_api_key="your-internal-api-key-here",
            )

        assert "INTERNAL_API_KEY" in str(exc_info.value)

    def test_production_rejects_short_internal_api_key(self):
        """프로덕션에서 짧은 Internal API Key 거부"""
        with pytest.raises(ValidationError) as exc_info:
            Settings(
                app_env="production",
                debug=False,
                internal_api_key="short-key",
            )

        assert "32 characters" in str(exc_info.value)

    def test_production_rejects_debug(self):
        with pytest.raises(ValidationError) as exc_info:
            Settings(
                app_env="production",
                debug=True,
                internal_api_key=VALID_KEY,
            )

        assert "DEBUG" in str(exc_info.value)

    def test_production_accepts_valid_settings(self):
        config = Settings(
            app_env="production",
            debug=False,
            internal_api_key=VALID_KEY,
        )

        assert config.is_production
        assert not config.is_development
