"""
Input validation helpers
"""

import re
import uuid
from typing import Optional

def normalize_phone(phone: Optional[str]) -> Optional[str]:
    """Strip formatting so '+44 7526 126716' and '+447526126716' group together"""
    if not phone:
        return None
    
    cleaned = re.sub(r'[\s\-\(\)\.]', '', str(phone))
    if cleaned.startswith('00'):
        cleaned = '+' + cleaned[2:]
    return cleaned or None

def is_valid_uuid(value) -> bool:
    """Check that a hardcoded id constant is a real UUID"""
    if not value:
        return False
    
    try:
        uuid.UUID(str(value))
        return True
    except ValueError:
        return False
