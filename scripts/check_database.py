#!/usr/bin/env python3
"""
Script to check database contents - row counts and calls table columns
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from crm_admin.main import CrmAdminApp
from crm_admin.services.database import DatabaseService

def main():
    """Check database contents"""
    print("🔍 Checking database contents...")
    
    app_instance = CrmAdminApp.for_script('service')
    
    with app_instance.app.app_context():
        try:
            db_service = DatabaseService()
            inventory = db_service.table_inventory()
            
            print("\n📊 Table row counts:")
            for table_name, entry in inventory.items():
                if entry['error']:
                    print(f"  ❌ {table_name}: {entry['error']}")
                else:
                    print(f"  ✅ {table_name}: {entry['count']} rows")
            
            if db_service.table_exists('calls'):
                print("\n📋 calls columns:")
                for column in db_service.describe_table('calls'):
                    nullable = '' if column['nullable'] else ' NOT NULL'
                    print(f"  - {column['name']}: {column['type']}{nullable}")
            
        except Exception as e:
            print(f"❌ Error checking database: {e}")
            import traceback
            traceback.print_exc()

if __name__ == '__main__':
    main()
