"""
Raw webhook log model
"""

from datetime import datetime
from crm_admin.models import db
from crm_admin.models.base import BaseModel

class WebhookLog(BaseModel):
    """Raw calling API event, kept for debugging and replay by hand"""
    __tablename__ = 'webhook_logs'
    
    event_id = db.Column(db.String(255), index=True)
    event_type = db.Column(db.String(100))
    call_id = db.Column(db.String(255), index=True)
    payload = db.Column(db.JSON)
    status = db.Column(db.String(50), default='received', index=True)  # received, processed, ignored, failed, logged (log-only route)
    error = db.Column(db.Text)
    received_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    processed_at = db.Column(db.DateTime)
