"""
Lead and contact models
"""

from crm_admin.models import db
from crm_admin.models.base import BaseModel

class Lead(BaseModel):
    """A person to be called, optionally owned by a user and tied to a campaign"""
    __tablename__ = 'leads'
    
    organization_id = db.Column(db.String(36), db.ForeignKey('organizations.id'), nullable=True, index=True)
    campaign_id = db.Column(db.String(36), db.ForeignKey('campaigns.id'), nullable=True, index=True)
    uploaded_by = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=True)
    first_name = db.Column(db.String(100))
    last_name = db.Column(db.String(100))
    phone = db.Column(db.String(50), index=True)
    email = db.Column(db.String(255))
    company = db.Column(db.String(255))
    status = db.Column(db.String(50), default='new')
    call_status = db.Column(db.String(50))
    last_call_at = db.Column(db.DateTime)
    
    @property
    def full_name(self):
        return ' '.join(part for part in [self.first_name, self.last_name] if part) or 'Unknown'

class Contact(BaseModel):
    """CRM contact, usually promoted from a qualified lead"""
    __tablename__ = 'contacts'
    
    organization_id = db.Column(db.String(36), db.ForeignKey('organizations.id'), nullable=True, index=True)
    owner_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=True)
    lead_id = db.Column(db.String(36), db.ForeignKey('leads.id'), nullable=True)
    first_name = db.Column(db.String(100))
    last_name = db.Column(db.String(100))
    phone = db.Column(db.String(50))
    email = db.Column(db.String(255))
