"""
Call cleanup helpers - stuck calls, duplicate calls, campaign totals
"""

import logging
from collections import OrderedDict
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from crm_admin.exceptions import RecordNotFoundError
from crm_admin.models import db
from crm_admin.models.call import Call
from crm_admin.models.campaign import Campaign
from crm_admin.utils.validators import normalize_phone

logger = logging.getLogger(__name__)

class CallMaintenanceService:
    """Service for one-off call table repairs"""

    def find_stuck_calls(self, older_than_minutes: Optional[int] = None) -> List[Call]:
        """Calls created as 'initiated' that never got a platform call id"""
        query = Call.query.filter(Call.status == 'initiated', Call.vapi_call_id.is_(None))
        if older_than_minutes:
            cutoff = datetime.utcnow() - timedelta(minutes=older_than_minutes)
            query = query.filter(Call.created_at < cutoff)
        return query.order_by(Call.created_at).all()

    def cleanup_stuck_calls(self, dry_run: bool = True, older_than_minutes: Optional[int] = None) -> Dict:
        """Delete stuck calls, grouped by campaign in the report"""
        stuck = self.find_stuck_calls(older_than_minutes)

        by_campaign = {}
        for call in stuck:
            by_campaign[call.campaign_id] = by_campaign.get(call.campaign_id, 0) + 1

        report = {
            'found': len(stuck),
            'deleted': 0,
            'by_campaign': by_campaign,
            'sample_ids': [call.id for call in stuck[:5]],
            'dry_run': dry_run,
        }

        if dry_run or not stuck:
            return report

        try:
            for call in stuck:
                db.session.delete(call)
            db.session.commit()
            report['deleted'] = len(stuck)
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Error deleting stuck calls: {e}")
            raise

        return report

    def find_duplicate_calls(self, campaign_id: Optional[str] = None) -> List[Call]:
        """Calls to drop so each campaign keeps one call per phone number

        A group with a finished call loses its pending calls; otherwise only
        the newest call of the group survives.
        """
        query = Call.query
        if campaign_id:
            query = query.filter(Call.campaign_id == campaign_id)
        calls = query.order_by(Call.campaign_id, Call.created_at).all()

        groups = OrderedDict()
        for call in calls:
            phone = normalize_phone(call.phone_number)
            if not phone:
                continue
            groups.setdefault((call.campaign_id, phone), []).append(call)

        duplicates = []
        for group in groups.values():
            if len(group) < 2:
                continue

            finished = [call for call in group if call.is_finished()]
            pending = [call for call in group if call.is_pending()]

            if finished and pending:
                duplicates.extend(pending)
            else:
                newest = max(group, key=lambda call: call.created_at or datetime.min)
                duplicates.extend(call for call in group if call.id != newest.id)

        return duplicates

    def remove_duplicate_calls(self, campaign_id: Optional[str] = None, dry_run: bool = True) -> Dict:
        """Delete duplicates one at a time so one bad row doesn't block the rest"""
        duplicates = self.find_duplicate_calls(campaign_id)
        report = {'found': len(duplicates), 'removed': [], 'failed': {}, 'dry_run': dry_run}

        if dry_run:
            return report

        for call in duplicates:
            call_id = call.id
            try:
                db.session.delete(call)
                db.session.commit()
                report['removed'].append(call_id)
            except SQLAlchemyError as e:
                db.session.rollback()
                logger.error(f"Error removing duplicate call {call_id}: {e}")
                report['failed'][call_id] = str(e)

        return report

    def recompute_campaign_metrics(self, campaign_id: str) -> Dict:
        """Recount campaign totals from its calls"""
        campaign = db.session.get(Campaign, campaign_id)
        if campaign is None:
            raise RecordNotFoundError('campaigns', campaign_id)

        calls = Call.query.filter_by(campaign_id=campaign_id).all()

        campaign.total_calls = len(calls)
        campaign.calls_completed = sum(1 for call in calls if call.status == 'completed')
        campaign.total_duration = sum(call.duration or 0 for call in calls)
        campaign.total_cost = round(sum(call.cost or 0 for call in calls), 4)

        try:
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Error updating campaign {campaign_id} metrics: {e}")
            raise

        return {
            'campaign_id': campaign.id,
            'name': campaign.name,
            'total_calls': campaign.total_calls,
            'calls_completed': campaign.calls_completed,
            'total_duration': campaign.total_duration,
            'total_cost': campaign.total_cost,
        }
