#!/usr/bin/env python3
"""
Create the webhook_logs table used by the webhook shims, if it's missing
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from crm_admin.main import CrmAdminApp
from crm_admin.models import db
from crm_admin.models.webhook_log import WebhookLog
from crm_admin.services.database import DatabaseService

def main():
    print("📊 Creating webhook_logs table...\n")
    
    app_instance = CrmAdminApp.for_script('service')
    
    with app_instance.app.app_context():
        try:
            if DatabaseService().table_exists('webhook_logs'):
                print("ℹ️  Table webhook_logs already exists")
                return
            
            WebhookLog.__table__.create(db.engine)
            print("✅ Table webhook_logs created")
            
        except Exception as e:
            print(f"❌ Could not create webhook_logs: {e}")
            import traceback
            traceback.print_exc()
            sys.exit(1)

if __name__ == '__main__':
    main()
