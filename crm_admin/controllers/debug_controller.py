"""
Debug endpoints for checking calling API credentials and database reachability
"""

import logging

from flask import jsonify

from crm_admin.controllers.base import BaseController
from crm_admin.exceptions import ConfigurationError
from crm_admin.services.database import DatabaseService
from crm_admin.services.vapi_service import VapiService

logger = logging.getLogger(__name__)

class DebugController(BaseController):
    """Unauthenticated debug endpoints - never expose these publicly"""
    
    def register_routes(self):
        self.app.add_url_rule('/api/debug/vapi', 'debug.vapi',
                             self.debug_vapi, methods=['GET'])
        self.app.add_url_rule('/api/debug/database', 'debug.database',
                             self.debug_database, methods=['GET'])
    
    def debug_vapi(self):
        """List assistants and phone numbers, reporting each side separately"""
        try:
            service = VapiService()
        except ConfigurationError as e:
            return jsonify({'success': False, **e.to_dict()}), 200
        
        results = service.check_resources()
        
        logger.info(
            f"Debug: assistants={results['assistants']['count']} "
            f"phone_numbers={results['phone_numbers']['count']}"
        )
        
        return jsonify({
            'success': True,
            'results': results,
            'summary': {
                'assistantCount': results['assistants']['count'],
                'phoneNumberCount': results['phone_numbers']['count'],
                'assistantsWorking': results['assistants']['success'],
                'phoneNumbersWorking': results['phone_numbers']['success']
            }
        }), 200
    
    def debug_database(self):
        """Row counts of the core tables"""
        inventory = DatabaseService().table_inventory()
        return jsonify({
            'success': all(entry['error'] is None for entry in inventory.values()),
            'tables': inventory
        }), 200
