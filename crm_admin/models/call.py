"""
Call and call attempt models
"""

from datetime import datetime
from crm_admin.models import db
from crm_admin.models.base import BaseModel

# Statuses used by the maintenance helpers
FINISHED_STATUSES = ('completed', 'busy', 'no_answer', 'voicemail')
PENDING_STATUSES = ('initiated', 'ringing')

class Call(BaseModel):
    """A phone call record placed through the calling API"""
    __tablename__ = 'calls'
    
    organization_id = db.Column(db.String(36), db.ForeignKey('organizations.id'), nullable=True, index=True)
    campaign_id = db.Column(db.String(36), db.ForeignKey('campaigns.id'), nullable=True, index=True)
    lead_id = db.Column(db.String(36), db.ForeignKey('leads.id'), nullable=True)
    vapi_call_id = db.Column(db.String(100), unique=True, nullable=True, index=True)
    direction = db.Column(db.String(20), default='outbound')
    phone_number = db.Column(db.String(50), index=True)
    status = db.Column(db.String(50), default='initiated', index=True)
    outcome = db.Column(db.String(50))
    end_reason = db.Column(db.String(100))
    
    # Timing and cost
    started_at = db.Column(db.DateTime)
    ended_at = db.Column(db.DateTime)
    duration = db.Column(db.Integer, default=0)  # seconds
    cost = db.Column(db.Float, default=0)
    cost_breakdown = db.Column(db.JSON)
    
    # Content
    recording_url = db.Column(db.Text)
    transcript = db.Column(db.Text)
    transcript_messages = db.Column(db.JSON)
    summary = db.Column(db.Text)
    sentiment = db.Column(db.String(20))
    
    # Qualification
    is_qualified = db.Column(db.Boolean)
    qualification_score = db.Column(db.Integer)
    
    raw_webhook_data = db.Column(db.JSON)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    lead = db.relationship('Lead', backref='calls', lazy=True)
    
    def is_finished(self):
        return self.status in FINISHED_STATUSES
    
    def is_pending(self):
        return self.status in PENDING_STATUSES

class CallAttempt(BaseModel):
    """One dialing attempt of a lead inside a campaign"""
    __tablename__ = 'call_attempts'
    
    campaign_id = db.Column(db.String(36), db.ForeignKey('campaigns.id'), nullable=True, index=True)
    lead_id = db.Column(db.String(36), db.ForeignKey('leads.id'), nullable=True)
    call_id = db.Column(db.String(36), db.ForeignKey('calls.id'), nullable=True)
    attempt_number = db.Column(db.Integer, default=1)
    status = db.Column(db.String(50), default='pending')
    attempted_at = db.Column(db.DateTime, default=datetime.utcnow)
