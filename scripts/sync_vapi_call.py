#!/usr/bin/env python3
"""
Manually sync one call from the calling API into the calls table
Use when the end-of-call webhook never arrived
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from crm_admin.main import CrmAdminApp
from crm_admin.services.webhook_service import WebhookService

# Platform call id (or our own calls.id)
CALL_ID = '7f3c2b1a-9d8e-4f6a-b5c4-3e2d1f0a9b8c'

def main():
    print(f"🔄 Syncing call {CALL_ID} from the calling API...")
    
    app_instance = CrmAdminApp.for_script('service')
    
    with app_instance.app.app_context():
        try:
            service = WebhookService()
            success, message = service.sync_call_from_vapi(CALL_ID)
            
            if not success:
                print(f"❌ {message}")
                return
            
            print(f"✅ {message}")
            call = service.find_call(CALL_ID)
            print(f"   Status: {call.status}")
            print(f"   Outcome: {call.outcome}")
            print(f"   Duration: {call.duration}s")
            print(f"   Cost: {call.cost}")
            print(f"   Recording: {call.recording_url or 'none'}")
            if call.transcript:
                print(f"   Transcript: {call.transcript[:100]}...")
            
        except Exception as e:
            print(f"❌ Sync failed: {e}")
            import traceback
            traceback.print_exc()

if __name__ == '__main__':
    main()
