"""
Development entry point for the webhook/debug server
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from crm_admin.config import config_manager
from crm_admin.main import CrmAdminApp, configure_logging

def main():
    """Main function to run the development server"""
    config_manager.reload()
    configure_logging()
    
    app = CrmAdminApp('development')
    app.run(
        debug=True,
        host='0.0.0.0',
        port=int(os.getenv('PORT', 5000))
    )

if __name__ == '__main__':
    main()
