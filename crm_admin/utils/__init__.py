"""
Utility functions and helpers
"""

from .formatters import parse_timestamp, format_currency, format_duration, mask_secret
from .validators import normalize_phone, is_valid_uuid

__all__ = [
    'parse_timestamp', 'format_currency', 'format_duration', 'mask_secret',
    'normalize_phone', 'is_valid_uuid'
]
