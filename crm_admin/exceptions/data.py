"""
Data validation and lookup exceptions
"""

from .base import CrmAdminException

class DataValidationError(CrmAdminException):
    """Exception raised for invalid input data"""
    
    def __init__(self, message: str, field: str = None, value=None):
        self.field = field
        self.value = value
        super().__init__(message, 'VALIDATION_ERROR')
    
    def to_dict(self):
        result = super().to_dict()
        if self.field:
            result['field'] = self.field
        return result

class RecordNotFoundError(CrmAdminException):
    """Exception raised when an expected row is missing"""
    
    def __init__(self, table: str, record_id: str):
        self.table = table
        self.record_id = record_id
        super().__init__(f"No {table} row with id {record_id}", 'RECORD_NOT_FOUND')

class ProbeError(CrmAdminException):
    """Exception raised when a constraint probe cannot start"""
    
    def __init__(self, message: str, table: str = None, field: str = None):
        self.table = table
        self.field = field
        super().__init__(message, 'PROBE_ERROR')
