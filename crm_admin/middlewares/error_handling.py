"""
Error handling middleware for global error management
"""

import logging

from flask import request, jsonify

from crm_admin.exceptions import CrmAdminException

logger = logging.getLogger(__name__)

class ErrorHandlingMiddleware:
    """Middleware for global error handling"""
    
    def __init__(self, app):
        self.app = app
        self.setup_error_handlers()
    
    def setup_error_handlers(self):
        """Setup global error handlers"""
        @self.app.errorhandler(404)
        def not_found(error):
            if request.path.startswith('/api/'):
                return jsonify({'error': 'Resource not found'}), 404
            return "Page not found", 404
        
        @self.app.errorhandler(405)
        def method_not_allowed(error):
            if request.path.startswith('/api/'):
                return jsonify({'error': 'Method not allowed'}), 405
            return "Method not allowed", 405
        
        @self.app.errorhandler(CrmAdminException)
        def toolkit_error(error):
            logger.error(f"{error.__class__.__name__} on {request.path}: {error.message}")
            return jsonify(error.to_dict()), 400
        
        @self.app.errorhandler(500)
        def internal_error(error):
            if request.path.startswith('/api/'):
                return jsonify({'error': 'Internal server error'}), 500
            return "Internal server error", 500
