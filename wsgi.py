"""
WSGI entry point for production deployment
"""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from crm_admin.config import config_manager
from crm_admin.main import CrmAdminApp, configure_logging

config_manager.reload()
configure_logging()

# Create application for production
app_instance = CrmAdminApp('production')

# Export the Flask app for WSGI servers
app = app_instance.app

if __name__ == '__main__':
    # For local testing
    app.run(host='0.0.0.0', port=int(os.getenv('PORT', 5000)))
