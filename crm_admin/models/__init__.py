# crm_admin/models/__init__.py
"""
Database models package
Mirrors the hosted CRM schema so scripts can query it through one db handle
"""

from flask_sqlalchemy import SQLAlchemy

# Global database instance
db = SQLAlchemy()

def init_db(app):
    """Initialize database with app"""
    db.init_app(app)

# Import all models
from .organization import Organization
from .user import User
from .campaign import Campaign
from .lead import Lead, Contact
from .call import Call, CallAttempt
from .webhook_log import WebhookLog

# Tables the inspection scripts report on
CORE_TABLES = [
    'organizations', 'users', 'campaigns', 'leads',
    'contacts', 'calls', 'call_attempts'
]

__all__ = [
    'db', 'init_db', 'CORE_TABLES',
    'Organization', 'User', 'Campaign', 'Lead', 'Contact',
    'Call', 'CallAttempt', 'WebhookLog'
]
