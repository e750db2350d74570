"""Settings tests."""

from pathlib import Path
from unittest.mock import patch

import pytest

from election_portal.infrastructure.config import (
    Settings,
    find_env_file,
    get_settings,
    init_sentry,
    reload_settings,
)


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CANDIDATE_FEED_URLS", raising=False)
        monkeypatch.delenv("CANDIDATES_PER_PAGE", raising=False)
        settings = Settings(_env_file=None)

        assert settings.CANDIDATES_PER_PAGE == 12
        assert settings.TOP_PARTIES_LIMIT == 7
        assert settings.CANDIDATE_FEED_TIMEOUT == 60.0
        assert len(settings.candidate_feed_url_list) == 2

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CANDIDATE_FEED_URLS", " http://a/x , ,http://b/y ")
        monkeypatch.setenv("CANDIDATES_PER_PAGE", "24")
        settings = Settings(_env_file=None)

        assert settings.candidate_feed_url_list == ["http://a/x", "http://b/y"]
        assert settings.CANDIDATES_PER_PAGE == 24

    def test_reload_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        try:
            assert reload_settings().LOG_LEVEL == "DEBUG"
            assert get_settings() is get_settings()
        finally:
            monkeypatch.delenv("LOG_LEVEL")
            reload_settings()


class TestFindEnvFile:
    def test_walks_up(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("LOG_LEVEL=DEBUG\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_env_file(nested) == env_file.resolve()


class TestInitSentry:
    def test_disabled_without_dsn(self) -> None:
        settings = Settings(_env_file=None, SENTRY_DSN="")
        with patch("sentry_sdk.init") as mock_init:
            assert init_sentry(settings) is False
        mock_init.assert_not_called()

    def test_enabled_with_dsn(self) -> None:
        settings = Settings(
            _env_file=None,
            SENTRY_DSN="https://key@sentry.example/1",
            ENVIRONMENT="production",
        )
        with patch("sentry_sdk.init") as mock_init:
            assert init_sentry(settings) is True
        mock_init.assert_called_once_with(
            dsn="https://key@sentry.example/1", environment="production"
        )
