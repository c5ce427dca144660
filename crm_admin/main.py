"""
Main application class - wires the webhook app and the script bootstrap
"""

import logging
import sys

from dotenv import load_dotenv

from crm_admin import create_app
from crm_admin.config import config_manager
from crm_admin.exceptions import ConfigurationError

def configure_logging(level=logging.INFO):
    """Console logging for scripts and the dev server"""
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

class CrmAdminApp:
    """Main application class that orchestrates all components"""
    
    def __init__(self, config_name='development', database_url=None, app=None):
        self.app = app if app is not None else create_app(config_name, database_url=database_url)
    
    @classmethod
    def for_script(cls, role='service'):
        """Load .env, connect with the given role and exit(1) when unconfigured"""
        load_dotenv()
        config_manager.reload()
        configure_logging()
        
        try:
            from crm_admin.services.database import create_database_client
            return cls(app=create_database_client(role))
        except ConfigurationError as e:
            print(f"❌ {e.message}")
            sys.exit(1)
    
    def initialize_database(self):
        """Create mirror tables - only meaningful against a local SQLite file"""
        from crm_admin.services.database import DatabaseService
        
        with self.app.app_context():
            if self.app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite'):
                DatabaseService().create_tables()
    
    def run(self, debug=True, host='0.0.0.0', port=5000):
        """Run the webhook/debug server"""
        self.initialize_database()
        
        print("📞 CRM webhook shim starting...")
        print(f"🌐 Webhook available at http://{host}:{port}/api/vapi/webhook")
        print(f"🔍 Debug available at http://{host}:{port}/api/debug/vapi")
        
        try:
            self.app.run(
                debug=debug,
                host=host,
                port=port,
                use_reloader=False
            )
        except KeyboardInterrupt:
            print("\n🛑 Shutting down...")
