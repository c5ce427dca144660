"""
Calling API (Vapi) REST client
Bearer key authentication, no retries - scripts are run by hand and re-run by hand
"""

import logging
from typing import Dict, List, Optional

import requests

from crm_admin.config import config_manager
from crm_admin.exceptions import ConfigurationError, VapiAPIError

logger = logging.getLogger(__name__)

class VapiService:
    """Service for the calling API"""

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None):
        self.api_key = api_key or config_manager.get_app_config('VAPI_API_KEY')
        if not self.api_key:
            raise ConfigurationError("VAPI_API_KEY is not set - add it to your .env file", 'VAPI_API_KEY')

        self.base_url = (base_url or config_manager.get_app_config('VAPI_BASE_URL')).rstrip('/')
        self.timeout = config_manager.get_app_config('VAPI_TIMEOUT_SECONDS', 30)
        self.headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def _make_request(self, method: str, endpoint: str, params: Optional[Dict] = None):
        """Make one request and return decoded JSON, raising VapiAPIError on failure"""
        url = f"{self.base_url}{endpoint}"
        logger.debug(f"{method} {url} params={params}")

        try:
            response = requests.request(method, url, headers=self.headers, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise VapiAPIError(f"Request to {endpoint} failed: {e}")

        if response.status_code >= 400:
            try:
                body = response.json()
            except ValueError:
                body = response.text
            raise VapiAPIError(f"{method} {endpoint} returned {response.status_code}", response.status_code, body)

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError:
            raise VapiAPIError(f"{method} {endpoint} returned a non-JSON body", response.status_code, response.text)

    @staticmethod
    def _as_list(data) -> List[Dict]:
        """List endpoints answer with a bare array, some proxies wrap it in results"""
        if data is None:
            return []
        if isinstance(data, dict):
            return data.get('results') or data.get('data') or []
        return list(data)

    def list_assistants(self) -> List[Dict]:
        """List assistants configured on the account"""
        return self._as_list(self._make_request('GET', '/assistant'))

    def list_phone_numbers(self) -> List[Dict]:
        """List phone numbers attached to the account"""
        return self._as_list(self._make_request('GET', '/phone-number'))

    def list_calls(self, limit: int = 100, assistant_id: Optional[str] = None) -> List[Dict]:
        """List the most recent calls"""
        params = {'limit': limit}
        if assistant_id:
            params['assistantId'] = assistant_id
        return self._as_list(self._make_request('GET', '/call', params=params))

    def get_call(self, call_id: str) -> Dict:
        """Fetch one call with its artifact, analysis and cost breakdown"""
        if not call_id:
            raise VapiAPIError("A call id is required")
        return self._make_request('GET', f'/call/{call_id}') or {}

    def check_resources(self) -> Dict:
        """Fetch assistants and phone numbers, reporting each side separately"""
        results = {}
        for name, fetch in (('assistants', self.list_assistants), ('phone_numbers', self.list_phone_numbers)):
            try:
                data = fetch()
                results[name] = {'success': True, 'count': len(data), 'data': data}
            except VapiAPIError as e:
                logger.warning(f"Could not list {name}: {e.message}")
                results[name] = {'success': False, 'count': 0, 'error': e.to_dict()}
        return results
