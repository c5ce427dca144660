"""
Services package
"""

from .database import DatabaseService, create_database_client
from .constraint_prober import ConstraintProber, ProbeResult, probe_values
from .vapi_service import VapiService
from .webhook_service import WebhookService
from .call_maintenance import CallMaintenanceService
from .lead_maintenance import LeadMaintenanceService
from .export_service import CallExportService

__all__ = [
    'DatabaseService', 'create_database_client',
    'ConstraintProber', 'ProbeResult', 'probe_values',
    'VapiService', 'WebhookService',
    'CallMaintenanceService', 'LeadMaintenanceService',
    'CallExportService'
]
