"""
Calling campaign model
"""

from crm_admin.models import db
from crm_admin.models.base import BaseModel

class Campaign(BaseModel):
    """A calling campaign belonging to an organization"""
    __tablename__ = 'campaigns'
    
    organization_id = db.Column(db.String(36), db.ForeignKey('organizations.id'), nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    status = db.Column(db.String(50), default='draft')
    assistant_id = db.Column(db.String(100))
    phone_number_id = db.Column(db.String(100))
    
    # Totals recomputed by the metrics script
    total_calls = db.Column(db.Integer, default=0)
    calls_completed = db.Column(db.Integer, default=0)
    total_duration = db.Column(db.Integer, default=0)
    total_cost = db.Column(db.Float, default=0)
    
    calls = db.relationship('Call', backref='campaign', lazy=True)
    leads = db.relationship('Lead', backref='campaign', lazy=True)
    
    def __repr__(self):
        return f'<Campaign {self.name}>'
