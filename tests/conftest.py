"""Shared fixtures - a fresh in-memory database per test."""
import os
import sys
from datetime import datetime, timedelta

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from crm_admin import create_app
from crm_admin.config import config_manager
from crm_admin.models import db, Organization, User, Campaign, Lead, Call


@pytest.fixture
def app(monkeypatch):
    monkeypatch.delenv("RENDER", raising=False)
    monkeypatch.delenv("FLASK_ENV", raising=False)
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def vapi_env(monkeypatch):
    """Calling API settings without touching the real .env"""
    monkeypatch.setenv("VAPI_API_KEY", "test-key-1234")
    monkeypatch.setenv("VAPI_BASE_URL", "https://vapi.test")
    config_manager.reload()
    yield
    monkeypatch.delenv("VAPI_API_KEY", raising=False)
    monkeypatch.delenv("VAPI_BASE_URL", raising=False)
    config_manager.reload()


@pytest.fixture
def no_vapi_env(monkeypatch):
    monkeypatch.delenv("VAPI_API_KEY", raising=False)
    config_manager.reload()
    yield
    config_manager.reload()


@pytest.fixture
def org(app):
    return Organization(name="Acme Insurance", slug="acme").save()


@pytest.fixture
def campaign(app, org):
    return Campaign(organization_id=org.id, name="Spring renewals").save()


@pytest.fixture
def make_lead(app, org, campaign):
    def _make(**kwargs):
        fields = {
            "organization_id": org.id,
            "campaign_id": campaign.id,
            "first_name": "Jane",
            "last_name": "Doe",
            "phone": "+447700900001",
        }
        fields.update(kwargs)
        return Lead(**fields).save()
    return _make


@pytest.fixture
def make_call(app, org, campaign):
    def _make(minutes_ago=0, **kwargs):
        fields = {
            "organization_id": org.id,
            "campaign_id": campaign.id,
            "phone_number": "+447700900001",
            "status": "initiated",
            "created_at": datetime.utcnow() - timedelta(minutes=minutes_ago),
        }
        fields.update(kwargs)
        return Call(**fields).save()
    return _make


@pytest.fixture
def make_user(app, org):
    def _make(**kwargs):
        fields = {
            "email": "admin@acme.test",
            "first_name": "Ada",
            "role": "admin",
            "organization_id": org.id,
        }
        fields.update(kwargs)
        return User(**fields).save()
    return _make
