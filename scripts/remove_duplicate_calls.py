#!/usr/bin/env python3
"""
Remove duplicate calls - one call per phone number per campaign
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from crm_admin.main import CrmAdminApp
from crm_admin.models.call import Call
from crm_admin.services.call_maintenance import CallMaintenanceService

# Flip to False once the dry run output looks right
DRY_RUN = True

def main():
    print("🧹 Removing duplicate calls...\n")
    
    app_instance = CrmAdminApp.for_script('service')
    
    with app_instance.app.app_context():
        try:
            service = CallMaintenanceService()
            duplicates = service.find_duplicate_calls()
            
            if not duplicates:
                print("✅ No duplicate calls found")
                return
            
            by_campaign = {}
            for call in duplicates:
                by_campaign.setdefault(call.campaign_id, []).append(call)
            
            for campaign_id, calls in by_campaign.items():
                print(f"\n📞 Campaign: {campaign_id}")
                print(f"   Found {len(calls)} duplicates to remove")
                for call in calls:
                    print(f"   - {call.id[:8]}... {call.phone_number} ({call.status})")
            
            if DRY_RUN:
                print("\n⚠️ Dry run - nothing deleted. Set DRY_RUN = False to delete.")
                return
            
            report = service.remove_duplicate_calls(dry_run=False)
            print(f"\n✅ Removed {len(report['removed'])} duplicate calls")
            for call_id, error in report['failed'].items():
                print(f"   ❌ Error removing {call_id}: {error}")
            
            print(f"📊 Calls remaining: {Call.query.count()}")
            
        except Exception as e:
            print(f"❌ Duplicate removal failed: {e}")
            import traceback
            traceback.print_exc()

if __name__ == '__main__':
    main()
