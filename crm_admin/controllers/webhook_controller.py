"""
Calling API Webhook Controller
"""

import logging
from datetime import datetime

from flask import jsonify

from crm_admin.controllers.base import BaseController
from crm_admin.services.webhook_service import WebhookService, split_payload

logger = logging.getLogger(__name__)

class WebhookController(BaseController):
    """Handles calling API webhook endpoints"""
    
    def register_routes(self):
        """Register webhook routes"""
        # Calling API webhooks - no authentication, the platform can't send any
        self.app.add_url_rule('/api/vapi/webhook', 'webhook.vapi',
                             self.handle_vapi_webhook, methods=['POST'])
        self.app.add_url_rule('/api/vapi/webhook-log', 'webhook.vapi_log',
                             self.handle_log_only_webhook, methods=['POST'])
        
        # Health check listing the endpoints
        self.app.add_url_rule('/api/vapi/status', 'webhook.status',
                             self.webhook_status, methods=['GET'])
    
    def handle_vapi_webhook(self):
        """Persist call lifecycle data; always answers 200 so the platform doesn't retry"""
        received_at = datetime.utcnow().isoformat()
        payload = self.get_json_payload()
        message, event_type, call_data = split_payload(payload)
        call_id = call_data.get('id') or message.get('callId')
        
        logger.info(f"Received {event_type} webhook for call {call_id}")
        
        try:
            processed, detail = WebhookService().process_event(payload)
        except Exception as e:
            logger.exception(f"Critical error in webhook handler: {e}")
            processed, detail = False, 'Processing failed'
        
        return jsonify({
            'received': True,
            'processed': processed,
            'message': detail,
            'type': event_type,
            'callId': call_id,
            'timestamp': received_at
        }), 200
    
    def handle_log_only_webhook(self):
        """Store and log the raw event without touching calls"""
        payload = self.get_json_payload()
        
        try:
            logged, detail = WebhookService().process_log_only(payload)
        except Exception as e:
            logger.exception(f"Error logging webhook: {e}")
            logged, detail = False, 'Logging failed'
        
        return jsonify({'received': True, 'logged': logged, 'message': detail}), 200
    
    def webhook_status(self):
        """Health check endpoint"""
        return jsonify({
            'status': 'active',
            'timestamp': datetime.utcnow().isoformat(),
            'endpoints': {
                'webhook': '/api/vapi/webhook',
                'webhook_log': '/api/vapi/webhook-log',
                'status': '/api/vapi/status',
                'debug': '/api/debug/vapi'
            }
        })
