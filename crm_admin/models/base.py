"""
Base model with common functionality
"""

import uuid
from datetime import datetime
from crm_admin.models import db

def new_uuid() -> str:
    """Client-side UUID default, the hosted tables use uuid primary keys"""
    return str(uuid.uuid4())

class BaseModel(db.Model):
    """Base model with common fields and methods"""
    __abstract__ = True
    
    id = db.Column(db.String(36), primary_key=True, default=new_uuid)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    
    def save(self):
        """Save instance to database"""
        db.session.add(self)
        db.session.commit()
        return self
    
    def delete(self):
        """Delete instance from database"""
        db.session.delete(self)
        db.session.commit()
        
    def to_dict(self):
        """Convert model to dictionary"""
        return {c.name: getattr(self, c.name) for c in self.__table__.columns}
