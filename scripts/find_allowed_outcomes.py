#!/usr/bin/env python3
"""
Find all allowed calls.outcome values by updating one existing call
The original outcome is put back after every accepted value
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from crm_admin.main import CrmAdminApp
from crm_admin.services.constraint_prober import ConstraintProber
from crm_admin.services.webhook_service import ENDED_REASON_OUTCOMES

CANDIDATE_OUTCOMES = [
    'busy', 'no_answer', 'answered', 'failed', 'voicemail',
    'completed', 'success', 'not_interested', 'callback_requested',
    'qualified', 'not_qualified', 'appointment_scheduled'
]

def main():
    print("🔍 Finding all allowed outcome values...")
    
    app_instance = CrmAdminApp.for_script('service')
    
    with app_instance.app.app_context():
        try:
            prober = ConstraintProber('calls')
            result = prober.probe_update('outcome', CANDIDATE_OUTCOMES)
            
            for outcome in CANDIDATE_OUTCOMES:
                if result.is_accepted(outcome):
                    print(f"   ✅ '{outcome}' - ALLOWED")
                elif outcome in result.errors:
                    print(f"   ⚠️ '{outcome}' - {result.errors[outcome]}")
                else:
                    print(f"   ❌ '{outcome}' - Not allowed")
            
            print("\n📋 Complete list of allowed outcomes:")
            for outcome in result.accepted:
                print(f"   - '{outcome}'")
            
            print("\n🎯 Ended reason mapping used by the webhook:")
            for ended_reason, outcome in ENDED_REASON_OUTCOMES.items():
                marker = '✅' if result.is_accepted(outcome) else '❌ NOT ALLOWED'
                print(f"   {ended_reason} → {outcome} {marker}")
            
            if result.leftovers:
                print(f"\n⚠️ Could not restore the original outcome on call {result.leftovers[0]}")
            
        except Exception as e:
            print(f"❌ Probe failed: {e}")
            import traceback
            traceback.print_exc()

if __name__ == '__main__':
    main()
