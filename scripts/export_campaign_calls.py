#!/usr/bin/env python3
"""
Export one campaign's calls to an Excel file
"""

import sys
import os
from datetime import datetime

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from crm_admin.main import CrmAdminApp
from crm_admin.services.export_service import CallExportService
from crm_admin.utils.validators import is_valid_uuid

CAMPAIGN_ID = 'd5483845-e373-4917-bb7d-dc3036cc0928'

def main():
    if not is_valid_uuid(CAMPAIGN_ID):
        print(f"❌ CAMPAIGN_ID is not a valid UUID: {CAMPAIGN_ID}")
        sys.exit(1)
    
    app_instance = CrmAdminApp.for_script('service')
    
    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    export_path = os.path.join(os.path.dirname(__file__), '..', 'exports', f"campaign_calls_{timestamp}.xlsx")
    os.makedirs(os.path.dirname(export_path), exist_ok=True)
    
    with app_instance.app.app_context():
        try:
            CallExportService().write_campaign_calls(CAMPAIGN_ID, export_path)
            print(f"✅ Export saved to: {os.path.abspath(export_path)}")
        except Exception as e:
            print(f"❌ Export failed: {e}")
            import traceback
            traceback.print_exc()

if __name__ == '__main__':
    main()
