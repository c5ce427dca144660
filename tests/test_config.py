"""Tests for environment-driven configuration."""
import pytest
from flask import Flask

from crm_admin.config import ConfigurationManager, load_config, normalize_database_url
from crm_admin.utils import (
    format_currency, format_duration, is_valid_uuid, mask_secret, normalize_phone, parse_timestamp,
)


@pytest.fixture
def clean_env(monkeypatch):
    for key in ("DATABASE_URL", "DATABASE_ANON_URL", "VAPI_API_KEY", "VAPI_BASE_URL",
                "STUCK_CALL_MINUTES", "RENDER", "FLASK_ENV"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestConfigurationManager:
    def test_defaults(self, clean_env):
        manager = ConfigurationManager()
        assert manager.get_database_url() is None
        assert manager.get_app_config("VAPI_BASE_URL") == "https://api.vapi.ai"
        assert manager.get_app_config("STUCK_CALL_MINUTES") == 30
        assert not manager.has_vapi_credentials()

    def test_anon_falls_back_to_service_url(self, clean_env):
        clean_env.setenv("DATABASE_URL", "postgres://svc@db.test/crm")
        manager = ConfigurationManager()
        assert manager.get_database_url("service") == "postgresql://svc@db.test/crm"
        assert manager.get_database_url("anon") == "postgresql://svc@db.test/crm"

    def test_separate_anon_url(self, clean_env):
        clean_env.setenv("DATABASE_URL", "postgresql://svc@db.test/crm")
        clean_env.setenv("DATABASE_ANON_URL", "postgresql://anon@db.test/crm")
        assert ConfigurationManager().get_database_url("anon") == "postgresql://anon@db.test/crm"

    def test_reload_picks_up_env(self, clean_env):
        manager = ConfigurationManager()
        clean_env.setenv("VAPI_API_KEY", "k")
        assert not manager.has_vapi_credentials()
        manager.reload()
        assert manager.has_vapi_credentials()

    def test_default_for_missing_key(self, clean_env):
        assert ConfigurationManager().get_app_config("NOPE", "fallback") == "fallback"


class TestLoadConfig:
    def test_testing_profile(self, clean_env):
        app = Flask(__name__)
        load_config(app, "testing")
        assert app.config["SQLALCHEMY_DATABASE_URI"] == "sqlite:///:memory:"
        assert app.config["CONFIG_NAME"] == "testing"

    def test_render_forces_production(self, clean_env):
        clean_env.setenv("RENDER", "1")
        app = Flask(__name__)
        load_config(app, "development")
        assert app.config["CONFIG_NAME"] == "production"
        assert app.config["SQLALCHEMY_ENGINE_OPTIONS"]["pool_pre_ping"] is True

    def test_render_keeps_testing(self, clean_env):
        clean_env.setenv("RENDER", "1")
        app = Flask(__name__)
        load_config(app, "testing")
        assert app.config["CONFIG_NAME"] == "testing"


class TestHelpers:
    def test_normalize_database_url(self):
        assert normalize_database_url("postgres://u@h/db") == "postgresql://u@h/db"
        assert normalize_database_url("sqlite:///x.db") == "sqlite:///x.db"
        assert normalize_database_url(None) is None

    def test_parse_timestamp(self):
        parsed = parse_timestamp("2025-03-01T10:00:00+02:00")
        assert (parsed.hour, parsed.tzinfo) == (8, None)
        assert parse_timestamp("garbage") is None
        assert parse_timestamp(0).year == 1970
        assert parse_timestamp(10 ** 20) is None
        assert parse_timestamp(float("inf")) is None

    def test_formatters(self):
        assert format_currency(0.18339) == "$0.1834"
        assert format_currency(None) == "$0.0000"
        assert format_duration(125) == "2:05"
        assert mask_secret("sk-abcdef123456") == "********3456"
        assert mask_secret(None) == "<not set>"

    def test_normalize_phone(self):
        assert normalize_phone("+44 (0) 7700-900.001") == "+4407700900001"
        assert normalize_phone("0044 7700 900001") == "+447700900001"
        assert normalize_phone("") is None

    def test_is_valid_uuid(self):
        assert is_valid_uuid("2566d8c5-2245-4a3c-b539-4cea21a07d9b")
        assert not is_valid_uuid("campaign-1")
        assert not is_valid_uuid(None)
