"""
CRM admin toolkit package
Entry point for the Flask webhook/debug app with factory pattern
"""

import os
from flask import Flask
from flask_cors import CORS

def create_app(config_name='development', database_url=None):
    """Application factory function"""

    app = Flask(__name__)

    # Load configuration FIRST
    from crm_admin.config import load_config
    load_config(app, config_name)

    # Scripts pick the service or anon role URL themselves
    if database_url:
        app.config['SQLALCHEMY_DATABASE_URI'] = database_url

    # Setup CORS for the debug endpoints
    setup_cors(app)

    # Initialize database
    from crm_admin.models import init_db
    init_db(app)

    # Setup middlewares
    from crm_admin.middlewares import setup_middlewares
    setup_middlewares(app)

    # Register controllers
    from crm_admin.controllers import register_controllers
    register_controllers(app)

    return app

def setup_cors(app):
    """Setup CORS for local dashboards hitting the debug routes"""

    origins = os.getenv('CORS_ORIGINS', '*')

    if origins == '*':
        allowed_origins = [
            "http://localhost:3000",
            "http://localhost:5173",
            "http://localhost:5174"
        ]
    else:
        allowed_origins = [o.strip() for o in origins.split(',') if o.strip()]

    CORS(app, resources={
        r"/api/*": {
            "origins": allowed_origins,
            "supports_credentials": True,
            "allow_headers": ["Content-Type", "Authorization"],
            "methods": ["GET", "POST", "OPTIONS"]
        }
    }, supports_credentials=True)
