"""
Organization model - tenant boundary
"""

from crm_admin.models import db
from crm_admin.models.base import BaseModel

class Organization(BaseModel):
    """Tenant that owns campaigns, users and calls"""
    __tablename__ = 'organizations'
    
    name = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=True)
    vapi_api_key = db.Column(db.String(255), nullable=True)
    
    campaigns = db.relationship('Campaign', backref='organization', lazy=True)
    users = db.relationship('User', backref='organization', lazy=True)
    
    def __repr__(self):
        return f'<Organization {self.name}>'
