"""Tests for stuck call cleanup, duplicate removal and campaign totals."""
import pytest

from crm_admin.exceptions import RecordNotFoundError
from crm_admin.models import db, Call, Campaign
from crm_admin.services.call_maintenance import CallMaintenanceService


class TestStuckCalls:
    def test_only_old_initiated_calls_without_platform_id(self, make_call):
        stuck = make_call(minutes_ago=90)
        make_call(minutes_ago=5)
        make_call(minutes_ago=90, vapi_call_id="vapi-1")
        make_call(minutes_ago=90, status="completed")

        found = CallMaintenanceService().find_stuck_calls(older_than_minutes=30)
        assert [call.id for call in found] == [stuck.id]

    def test_dry_run_deletes_nothing(self, make_call, campaign):
        make_call(minutes_ago=90)
        make_call(minutes_ago=60)

        report = CallMaintenanceService().cleanup_stuck_calls(dry_run=True, older_than_minutes=30)

        assert report["found"] == 2
        assert report["deleted"] == 0
        assert report["by_campaign"] == {campaign.id: 2}
        assert Call.query.count() == 2

    def test_cleanup(self, make_call):
        make_call(minutes_ago=90)
        keeper = make_call(minutes_ago=90, status="ringing")

        report = CallMaintenanceService().cleanup_stuck_calls(dry_run=False, older_than_minutes=30)

        assert report["deleted"] == 1
        assert [call.id for call in Call.query.all()] == [keeper.id]


class TestDuplicateCalls:
    def test_pending_dropped_when_group_has_finished_call(self, make_call):
        finished = make_call(minutes_ago=30, status="completed")
        pending = make_call(minutes_ago=10, status="initiated", phone_number="+44 7700 900001")

        duplicates = CallMaintenanceService().find_duplicate_calls()

        assert [call.id for call in duplicates] == [pending.id]
        assert finished not in duplicates

    def test_newest_kept_otherwise(self, make_call):
        older = make_call(minutes_ago=30, status="initiated")
        newest = make_call(minutes_ago=1, status="initiated")

        duplicates = CallMaintenanceService().find_duplicate_calls()

        assert [call.id for call in duplicates] == [older.id]
        assert newest not in duplicates

    def test_different_numbers_are_not_duplicates(self, make_call):
        make_call(phone_number="+447700900001")
        make_call(phone_number="+447700900002")
        assert CallMaintenanceService().find_duplicate_calls() == []

    def test_same_number_other_campaign(self, make_call, org):
        other = Campaign(organization_id=org.id, name="Other").save()
        make_call()
        make_call(campaign_id=other.id)
        assert CallMaintenanceService().find_duplicate_calls() == []

    def test_remove(self, make_call):
        make_call(minutes_ago=30, status="completed")
        pending = make_call(minutes_ago=10, status="ringing")
        service = CallMaintenanceService()

        dry = service.remove_duplicate_calls(dry_run=True)
        assert dry["found"] == 1
        assert Call.query.count() == 2

        report = service.remove_duplicate_calls(dry_run=False)
        assert report["removed"] == [pending.id]
        assert report["failed"] == {}
        assert Call.query.count() == 1


class TestCampaignMetrics:
    def test_recompute(self, make_call, campaign):
        make_call(status="completed", duration=60, cost=0.1)
        make_call(status="completed", duration=30, cost=0.05, phone_number="+2")
        make_call(status="busy", duration=0, cost=0.01, phone_number="+3")

        metrics = CallMaintenanceService().recompute_campaign_metrics(campaign.id)

        assert metrics["total_calls"] == 3
        assert metrics["calls_completed"] == 2
        assert metrics["total_duration"] == 90
        assert metrics["total_cost"] == pytest.approx(0.16)
        assert db.session.get(Campaign, campaign.id).total_calls == 3

    def test_unknown_campaign(self, app):
        with pytest.raises(RecordNotFoundError):
            CallMaintenanceService().recompute_campaign_metrics("missing")
