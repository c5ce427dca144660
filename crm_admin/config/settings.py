"""
Configuration manager for application settings
"""

import os
from typing import Dict, Optional

DEFAULT_VAPI_BASE_URL = "https://api.vapi.ai"

def normalize_database_url(database_url: Optional[str]) -> Optional[str]:
    """Hosted providers hand out postgres:// but SQLAlchemy 1.4+ requires postgresql://"""
    if database_url and database_url.startswith('postgres://'):
        return database_url.replace('postgres://', 'postgresql://', 1)
    return database_url

class ConfigurationManager:
    """Manages environment-driven settings for the scripts and the webhook app"""

    def __init__(self):
        self._app_config = self._initialize_app_config()

    def _initialize_app_config(self) -> Dict:
        """Initialize application-wide configuration"""
        service_url = normalize_database_url(os.getenv('DATABASE_URL'))
        anon_url = normalize_database_url(os.getenv('DATABASE_ANON_URL')) or service_url

        return {
            # Database roles
            'DATABASE_URL': service_url,
            'DATABASE_ANON_URL': anon_url,

            # Calling API
            'VAPI_API_KEY': os.getenv('VAPI_API_KEY'),
            'VAPI_BASE_URL': os.getenv('VAPI_BASE_URL', DEFAULT_VAPI_BASE_URL).rstrip('/'),
            'VAPI_TIMEOUT_SECONDS': 30,

            # Email service
            'EMAIL_SERVICE_API_KEY': os.getenv('EMAIL_SERVICE_API_KEY'),

            # Maintenance defaults
            'STUCK_CALL_MINUTES': int(os.getenv('STUCK_CALL_MINUTES', 30)),
        }

    def reload(self):
        """Re-read the environment (after load_dotenv or in tests)"""
        self._app_config = self._initialize_app_config()

    def get_app_config(self, key: str, default=None):
        """Get application configuration value"""
        value = self._app_config.get(key)
        return default if value is None else value

    def get_database_url(self, role: str = 'service') -> Optional[str]:
        """Get the connection URL for the service or anon role"""
        if role == 'anon':
            return self._app_config.get('DATABASE_ANON_URL')
        if role == 'service':
            return self._app_config.get('DATABASE_URL')
        raise ValueError(f"Unknown database role: {role}")

    def has_vapi_credentials(self) -> bool:
        """Check if calling API key is configured"""
        return bool(self._app_config.get('VAPI_API_KEY'))
