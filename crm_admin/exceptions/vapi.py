"""
Calling API exceptions
"""

from .base import CrmAdminException

class VapiAPIError(CrmAdminException):
    """Exception raised for calling API errors"""
    
    def __init__(self, message: str, status_code: int = None, response_data=None):
        self.status_code = status_code
        self.response_data = response_data
        super().__init__(message, 'VAPI_API_ERROR')
    
    def to_dict(self):
        result = super().to_dict()
        if self.status_code:
            result['status_code'] = self.status_code
        if self.response_data:
            result['response_data'] = self.response_data
        return result
