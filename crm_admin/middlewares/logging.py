"""
Request logging middleware for the webhook and debug routes
"""

import logging
import time

from flask import g, request

logger = logging.getLogger(__name__)

class LoggingMiddleware:
    """Logs /api/ requests; webhook deliveries always, the rest in debug only"""
    
    def __init__(self, app):
        self.app = app
        self.setup_logging()
    
    def _should_log(self):
        if not request.path.startswith('/api/'):
            return False
        return self.app.debug or request.path.startswith('/api/vapi/webhook')
    
    def setup_logging(self):
        @self.app.before_request
        def start_timer():
            g.request_started = time.monotonic()
        
        @self.app.after_request
        def log_response_info(resp):
            if self._should_log():
                elapsed_ms = (time.monotonic() - g.get('request_started', time.monotonic())) * 1000
                logger.info(
                    f"{request.method} {request.path} {resp.status_code} "
                    f"{elapsed_ms:.0f}ms from {request.remote_addr}"
                )
            return resp
