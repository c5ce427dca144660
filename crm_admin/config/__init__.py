"""
Configuration package
"""

import os
from .settings import ConfigurationManager, normalize_database_url

# Global configuration instance
config_manager = ConfigurationManager()

def load_config(app, config_name='development'):
    """Load configuration into Flask app"""

    # Detect if running on Render or an explicit production env
    if os.environ.get('RENDER') or os.environ.get('FLASK_ENV') == 'production':
        if config_name != 'testing':
            config_name = 'production'

    basedir = os.path.abspath(os.path.dirname(__file__))

    configs = {
        'development': {
            'DEBUG': True,
            'SQLALCHEMY_DATABASE_URI': _get_dev_database_url(basedir),
            'SQLALCHEMY_TRACK_MODIFICATIONS': False,
        },
        'testing': {
            'TESTING': True,
            'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
            'SQLALCHEMY_TRACK_MODIFICATIONS': False,
        },
        'production': {
            'DEBUG': False,
            'SQLALCHEMY_DATABASE_URI': _get_production_database_url(basedir),
            'SQLALCHEMY_TRACK_MODIFICATIONS': False,
            'SQLALCHEMY_ENGINE_OPTIONS': {
                'pool_pre_ping': True,
                'pool_recycle': 300,
            }
        }
    }

    app.config.update(configs.get(config_name, configs['development']))
    app.config['CONFIG_NAME'] = config_name if config_name in configs else 'development'
    print(f"⚙️ Loaded {app.config['CONFIG_NAME']} configuration")

def _get_dev_database_url(basedir):
    """Get development database URL"""
    database_url = config_manager.get_database_url('service')
    if database_url:
        return database_url

    db_path = os.path.join(basedir, "..", "..", "instance", "crm_admin.db")
    os.makedirs(os.path.dirname(db_path), exist_ok=True)
    return f"sqlite:///{db_path}"

def _get_production_database_url(basedir):
    """Get production database URL with fallback"""
    database_url = config_manager.get_database_url('service')
    if database_url:
        return database_url

    # Fallback to SQLite if no hosted database configured
    return _get_dev_database_url(basedir)

__all__ = ['config_manager', 'load_config', 'ConfigurationManager', 'normalize_database_url']
