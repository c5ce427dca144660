#!/usr/bin/env python3
"""
Assign leads with no owner to an organization admin, and report orphan leads
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from crm_admin.main import CrmAdminApp
from crm_admin.services.lead_maintenance import LeadMaintenanceService
from crm_admin.utils.validators import is_valid_uuid

ORGANIZATION_ID = '2566d8c5-2245-4a3c-b539-4cea21a07d9b'
OWNER_USER_ID = 'b0c4a9e2-6f1d-4c3b-9a55-2f7e8d1c0a11'

# Flip to False once the dry run output looks right
DRY_RUN = True

def main():
    print("🔧 Fixing lead ownership...\n")
    
    for name, value in (('ORGANIZATION_ID', ORGANIZATION_ID), ('OWNER_USER_ID', OWNER_USER_ID)):
        if not is_valid_uuid(value):
            print(f"❌ {name} is not a valid UUID: {value}")
            sys.exit(1)
    
    app_instance = CrmAdminApp.for_script('service')
    
    with app_instance.app.app_context():
        try:
            service = LeadMaintenanceService()
            
            report = service.assign_unowned_leads(ORGANIZATION_ID, OWNER_USER_ID, dry_run=DRY_RUN)
            print(f"📋 Unowned leads in organization: {report['found']}")
            if report['dry_run']:
                print(f"   Would assign them to {report['owner']}")
            else:
                print(f"   ✅ Assigned {report['assigned']} leads to {report['owner']}")
            
            orphans = service.find_orphan_leads()
            print(f"\n👻 Leads without an organization: {len(orphans)}")
            for lead in orphans[:10]:
                print(f"   - {lead.id} {lead.full_name} {lead.phone or ''}")
            
        except Exception as e:
            print(f"❌ Error fixing lead ownership: {e}")
            import traceback
            traceback.print_exc()

if __name__ == '__main__':
    main()
