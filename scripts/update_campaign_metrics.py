#!/usr/bin/env python3
"""
Recompute campaign totals from the calls table
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from crm_admin.main import CrmAdminApp
from crm_admin.models.campaign import Campaign
from crm_admin.services.call_maintenance import CallMaintenanceService
from crm_admin.utils.formatters import format_currency, format_duration

def main():
    print("📊 Updating campaign metrics...\n")
    
    app_instance = CrmAdminApp.for_script('service')
    
    with app_instance.app.app_context():
        try:
            service = CallMaintenanceService()
            campaigns = Campaign.query.order_by(Campaign.created_at.desc()).all()
            
            for campaign in campaigns:
                metrics = service.recompute_campaign_metrics(campaign.id)
                print(f"✅ {metrics['name']}: {metrics['total_calls']} calls, "
                      f"{metrics['calls_completed']} completed, "
                      f"{format_duration(metrics['total_duration'])} talk time, "
                      f"{format_currency(metrics['total_cost'])}")
            
            print(f"\n✅ Updated {len(campaigns)} campaigns")
            
        except Exception as e:
            print(f"❌ Metrics update failed: {e}")
            import traceback
            traceback.print_exc()

if __name__ == '__main__':
    main()
