"""
Platform user model
"""

from crm_admin.models import db
from crm_admin.models.base import BaseModel

class User(BaseModel):
    """Platform account with a role and organization membership"""
    __tablename__ = 'users'
    
    email = db.Column(db.String(255), unique=True, nullable=False)
    first_name = db.Column(db.String(100))
    last_name = db.Column(db.String(100))
    role = db.Column(db.String(50), default='agent')
    organization_id = db.Column(db.String(36), db.ForeignKey('organizations.id'), nullable=True)
    is_active = db.Column(db.Boolean, default=True)
    
    @property
    def full_name(self):
        return ' '.join(part for part in [self.first_name, self.last_name] if part) or self.email
    
    def __repr__(self):
        return f'<User {self.email}>'
