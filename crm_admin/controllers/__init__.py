"""
Controllers package
Exports the webhook/debug controllers and registration function
"""

from .webhook_controller import WebhookController
from .debug_controller import DebugController

def register_controllers(app):
    """Register all controllers with the Flask app"""
    WebhookController(app)
    DebugController(app)
    print("All controllers registered successfully")


__all__ = [
    'register_controllers',
    'WebhookController', 'DebugController'
]
