"""
Custom exception classes for the toolkit
"""

from .base import CrmAdminException, ConfigurationError
from .data import DataValidationError, RecordNotFoundError, ProbeError
from .vapi import VapiAPIError

__all__ = [
    'CrmAdminException', 'ConfigurationError',
    'DataValidationError', 'RecordNotFoundError', 'ProbeError',
    'VapiAPIError'
]
