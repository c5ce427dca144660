"""
Base exception classes
"""

class CrmAdminException(Exception):
    """Base exception for the CRM admin toolkit"""
    
    def __init__(self, message: str, error_code: str = None):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)
    
    def to_dict(self):
        """Convert exception to dictionary for JSON responses"""
        return {
            'error': self.message,
            'error_code': self.error_code,
            'type': self.__class__.__name__
        }

class ConfigurationError(CrmAdminException):
    """Exception raised when a required setting is missing"""
    
    def __init__(self, message: str, setting: str = None):
        self.setting = setting
        super().__init__(message, 'CONFIGURATION_ERROR')
    
    def to_dict(self):
        result = super().to_dict()
        if self.setting:
            result['setting'] = self.setting
        return result
