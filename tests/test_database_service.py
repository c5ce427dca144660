"""Tests for the database client factory and inspection helpers."""
import pytest

from crm_admin.config import config_manager
from crm_admin.exceptions import ConfigurationError, DataValidationError
from crm_admin.services.database import DatabaseService, create_database_client


class TestCreateDatabaseClient:
    def test_missing_service_url(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.delenv("DATABASE_ANON_URL", raising=False)
        config_manager.reload()
        try:
            with pytest.raises(ConfigurationError) as exc:
                create_database_client("service")
            assert exc.value.setting == "DATABASE_URL"
        finally:
            config_manager.reload()

    def test_missing_anon_url(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.delenv("DATABASE_ANON_URL", raising=False)
        config_manager.reload()
        try:
            with pytest.raises(ConfigurationError) as exc:
                create_database_client("anon")
            assert exc.value.setting == "DATABASE_ANON_URL"
        finally:
            config_manager.reload()

    def test_explicit_url(self, monkeypatch):
        monkeypatch.delenv("RENDER", raising=False)
        monkeypatch.delenv("FLASK_ENV", raising=False)
        app = create_database_client(database_url="sqlite:///:memory:")
        assert app.config["SQLALCHEMY_DATABASE_URI"] == "sqlite:///:memory:"

    def test_unknown_role(self):
        with pytest.raises(ValueError):
            create_database_client("superuser")


class TestDatabaseService:
    def test_inventory_counts(self, make_call, make_lead):
        make_lead()
        make_call()
        make_call(phone_number="+447700900002")

        inventory = DatabaseService().table_inventory()

        assert inventory["calls"] == {"count": 2, "error": None}
        assert inventory["leads"] == {"count": 1, "error": None}
        assert inventory["users"] == {"count": 0, "error": None}

    def test_inventory_reports_bad_table(self, app):
        inventory = DatabaseService().table_inventory(["calls", "no_such_table"])
        assert inventory["calls"]["error"] is None
        assert inventory["no_such_table"]["count"] is None
        assert "no_such_table" in inventory["no_such_table"]["error"]

    def test_count_rows_unknown_table(self, app):
        with pytest.raises(DataValidationError):
            DatabaseService().count_rows("nope")

    def test_describe_table(self, app):
        columns = {column["name"]: column for column in DatabaseService().describe_table("calls")}
        assert "vapi_call_id" in columns
        assert "outcome" in columns
        assert columns["id"]["nullable"] is False

    def test_sample_rows(self, make_call):
        call = make_call()
        rows = DatabaseService().sample_rows("calls", limit=1)
        assert rows[0]["id"] == call.id

    def test_table_exists(self, app):
        service = DatabaseService()
        assert service.table_exists("webhook_logs")
        assert not service.table_exists("nope")
