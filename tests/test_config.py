"""
Tests for signalist.config environment handling.
"""

import importlib
import os
from unittest import mock

import pytest

import signalist.config


@pytest.fixture
def reload_config():
    def _reload(env):
        with mock.patch.dict(os.environ, env, clear=True), mock.patch("dotenv.load_dotenv"):
            return importlib.reload(signalist.config)

    yield _reload
    importlib.reload(signalist.config)


class TestConfig:
    def test_defaults(self, reload_config):
        config = reload_config({})

        assert config.FINNHUB_API_KEY == ""
        assert config.FINNHUB_BASE_URL == "https://finnhub.io/api/v1"
        assert config.NEWS_SUMMARY_CRON == "0 12 * * *"
        assert config.WELCOME_EMAIL_MODEL == "gemini-2.0-flash-lite"
        assert config.NEWS_SUMMARY_MODEL == "gemini-2.5-flash-lite"
        assert config.NEWS_LOOKBACK_DAYS == 5
        assert config.MAX_NEWS_ARTICLES == 6
        assert config.SMTP_PORT == 587
        assert config.SUPABASE_URL is None

    def test_env_overrides(self, reload_config):
        config = reload_config({
            "FINNHUB_API_KEY": "abc",
            "SMTP_PORT": "2525",
            "NEWS_SUMMARY_CRON": "30 7 * * 1-5",
            "MAX_NEWS_ARTICLES": "4",
        })

        assert config.FINNHUB_API_KEY == "abc"
        assert config.SMTP_PORT == 2525
        assert config.NEWS_SUMMARY_CRON == "30 7 * * 1-5"
        assert config.MAX_NEWS_ARTICLES == 4
