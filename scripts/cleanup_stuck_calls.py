#!/usr/bin/env python3
"""
Clean up calls stuck in 'initiated' that never reached the calling API
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from crm_admin.config import config_manager
from crm_admin.main import CrmAdminApp
from crm_admin.services.call_maintenance import CallMaintenanceService

# Flip to False once the dry run output looks right
DRY_RUN = True

def main():
    print("🧹 Cleaning up stuck initiated calls...\n")
    
    app_instance = CrmAdminApp.for_script('service')
    
    with app_instance.app.app_context():
        try:
            older_than = config_manager.get_app_config('STUCK_CALL_MINUTES')
            report = CallMaintenanceService().cleanup_stuck_calls(dry_run=DRY_RUN, older_than_minutes=older_than)
            
            print(f"Found {report['found']} stuck initiated calls older than {older_than} minutes:\n")
            if report['found'] == 0:
                print("✅ No stuck calls to clean up!")
                return
            
            for campaign_id, count in report['by_campaign'].items():
                print(f"  Campaign {campaign_id}: {count} calls")
            
            print("\nSample calls:")
            for call_id in report['sample_ids']:
                print(f"  - {call_id}")
            
            if report['dry_run']:
                print("\n⚠️ Dry run - nothing deleted. Set DRY_RUN = False to delete.")
            else:
                print(f"\n✅ Deleted {report['deleted']} stuck calls")
            
        except Exception as e:
            print(f"❌ Cleanup failed: {e}")
            import traceback
            traceback.print_exc()

if __name__ == '__main__':
    main()
