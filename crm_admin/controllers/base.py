"""
Base controller with common functionality
"""

from flask import request

class BaseController:
    """Base controller with common functionality"""
    
    def __init__(self, app):
        self.app = app
        self.register_routes()
    
    def register_routes(self):
        """Register routes - to be implemented by subclasses"""
        pass
    
    def get_json_payload(self):
        """Request body as JSON, or None when it isn't valid JSON"""
        return request.get_json(force=True, silent=True)
