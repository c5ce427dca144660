"""
Data formatting and parsing utilities
"""

from datetime import datetime, timezone
from typing import Optional, Union

def parse_timestamp(value) -> Optional[datetime]:
    """Parse an ISO-8601 string (or epoch millis) into a naive UTC datetime"""
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, (int, float)):
        try:
            parsed = datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)
        except (ValueError, OverflowError, OSError):
            return None
    else:
        try:
            parsed = datetime.fromisoformat(str(value).strip().replace('Z', '+00:00'))
        except ValueError:
            return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed

def format_currency(amount: Union[int, float, None], currency_symbol: str = '$') -> str:
    """Format number as currency, calls cost fractions of a cent so keep 4 places"""
    try:
        return f"{currency_symbol}{float(amount or 0):,.4f}"
    except (ValueError, TypeError):
        return f"{currency_symbol}0.0000"

def format_duration(seconds: Union[int, float, None]) -> str:
    """Format call duration as m:ss"""
    try:
        total = int(round(float(seconds or 0)))
    except (ValueError, TypeError):
        total = 0
    minutes, secs = divmod(max(total, 0), 60)
    return f"{minutes}:{secs:02d}"

def mask_secret(secret: Optional[str], visible: int = 4) -> str:
    """Show only the tail of a key when printing configuration"""
    if not secret:
        return '<not set>'
    if len(secret) <= visible:
        return '*' * len(secret)
    return '*' * 8 + secret[-visible:]
