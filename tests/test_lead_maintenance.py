"""Tests for lead ownership repairs."""
import pytest

from crm_admin.exceptions import DataValidationError, RecordNotFoundError
from crm_admin.models import db, Lead, Organization
from crm_admin.services.lead_maintenance import LeadMaintenanceService


class TestAssignUnownedLeads:
    def test_dry_run(self, org, make_user, make_lead):
        user = make_user()
        make_lead()
        make_lead(uploaded_by=user.id)

        report = LeadMaintenanceService().assign_unowned_leads(org.id, user.id)

        assert report == {"found": 1, "assigned": 0, "owner": "admin@acme.test", "dry_run": True}
        assert Lead.query.filter(Lead.uploaded_by.is_(None)).count() == 1

    def test_assign(self, org, make_user, make_lead):
        user = make_user()
        lead = make_lead()

        report = LeadMaintenanceService().assign_unowned_leads(org.id, user.id, dry_run=False)

        assert report["assigned"] == 1
        assert db.session.get(Lead, lead.id).uploaded_by == user.id

    def test_user_from_other_organization(self, org, make_user):
        other = Organization(name="Other").save()
        user = make_user(organization_id=other.id)
        with pytest.raises(DataValidationError):
            LeadMaintenanceService().assign_unowned_leads(org.id, user.id)

    def test_unknown_user(self, org):
        with pytest.raises(RecordNotFoundError):
            LeadMaintenanceService().assign_unowned_leads(org.id, "missing")


class TestOrphanLeads:
    def test_find_and_delete(self, make_lead):
        kept = make_lead()
        make_lead(organization_id=None)
        make_lead(organization_id="gone-org-id")

        service = LeadMaintenanceService()
        assert len(service.find_orphan_leads()) == 2

        report = service.delete_orphan_leads(dry_run=False)
        assert report["deleted"] == 2
        assert [lead.id for lead in Lead.query.all()] == [kept.id]
