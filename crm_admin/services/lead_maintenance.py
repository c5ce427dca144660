"""
Lead ownership repairs
"""

import logging
from typing import Dict, List

from sqlalchemy.exc import SQLAlchemyError

from crm_admin.exceptions import DataValidationError, RecordNotFoundError
from crm_admin.models import db
from crm_admin.models.lead import Lead
from crm_admin.models.organization import Organization
from crm_admin.models.user import User

logger = logging.getLogger(__name__)

class LeadMaintenanceService:
    """Service for lead ownership fixes"""

    def find_unowned_leads(self, organization_id: str) -> List[Lead]:
        return Lead.query.filter(
            Lead.organization_id == organization_id,
            Lead.uploaded_by.is_(None)
        ).all()

    def assign_unowned_leads(self, organization_id: str, user_id: str, dry_run: bool = True) -> Dict:
        """Give every unowned lead of an organization to one of its users"""
        user = db.session.get(User, user_id)
        if user is None:
            raise RecordNotFoundError('users', user_id)
        if user.organization_id != organization_id:
            raise DataValidationError(
                f"User {user.email} does not belong to organization {organization_id}",
                'user_id', user_id
            )

        leads = self.find_unowned_leads(organization_id)
        report = {'found': len(leads), 'assigned': 0, 'owner': user.email, 'dry_run': dry_run}

        if dry_run or not leads:
            return report

        try:
            for lead in leads:
                lead.uploaded_by = user.id
            db.session.commit()
            report['assigned'] = len(leads)
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Error assigning leads to {user.email}: {e}")
            raise

        return report

    def find_orphan_leads(self) -> List[Lead]:
        """Leads whose organization row is gone (or never set)"""
        return Lead.query.outerjoin(
            Organization, Lead.organization_id == Organization.id
        ).filter(Organization.id.is_(None)).all()

    def delete_orphan_leads(self, dry_run: bool = True) -> Dict:
        leads = self.find_orphan_leads()
        report = {'found': len(leads), 'deleted': 0, 'dry_run': dry_run}

        if dry_run or not leads:
            return report

        try:
            for lead in leads:
                db.session.delete(lead)
            db.session.commit()
            report['deleted'] = len(leads)
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Error deleting orphan leads: {e}")
            raise

        return report
