#!/usr/bin/env python3
"""
List calling API assistants, phone numbers and the latest calls
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

from crm_admin.config import config_manager
from crm_admin.exceptions import ConfigurationError, VapiAPIError
from crm_admin.services.vapi_service import VapiService
from crm_admin.utils.formatters import format_currency, mask_secret

RECENT_CALL_LIMIT = 10

def main():
    load_dotenv()
    config_manager.reload()
    
    print("🔍 Checking calling API resources...")
    print(f"🔑 API key: {mask_secret(config_manager.get_app_config('VAPI_API_KEY'))}")
    
    try:
        service = VapiService()
    except ConfigurationError as e:
        print(f"❌ {e.message}")
        sys.exit(1)
    
    results = service.check_resources()
    
    assistants = results['assistants']
    if assistants['success']:
        print(f"\n🤖 Assistants: {assistants['count']}")
        for assistant in assistants['data']:
            print(f"  - {assistant.get('id')} {assistant.get('name', '(unnamed)')}")
    else:
        print(f"\n❌ Assistants: {assistants['error']['error']}")
    
    phone_numbers = results['phone_numbers']
    if phone_numbers['success']:
        print(f"\n📱 Phone numbers: {phone_numbers['count']}")
        for number in phone_numbers['data']:
            print(f"  - {number.get('id')} {number.get('number', '')} {number.get('name', '')}")
    else:
        print(f"\n❌ Phone numbers: {phone_numbers['error']['error']}")
    
    try:
        calls = service.list_calls(limit=RECENT_CALL_LIMIT)
        print(f"\n📞 Latest {len(calls)} calls:")
        for call in calls:
            customer = (call.get('customer') or {}).get('number', 'unknown')
            print(f"  - {call.get('id')} {call.get('status')} {customer} "
                  f"{call.get('endedReason', '')} {format_currency(call.get('cost'))}")
    except VapiAPIError as e:
        print(f"\n❌ Calls: {e.message}")

if __name__ == '__main__':
    main()
