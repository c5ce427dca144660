"""
Database client factory and inspection helpers
"""

import logging
from typing import Dict, List, Optional

from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError

from crm_admin.config import config_manager
from crm_admin.exceptions import ConfigurationError, DataValidationError
from crm_admin.models import db, CORE_TABLES

logger = logging.getLogger(__name__)

def create_database_client(role: str = 'service', database_url: Optional[str] = None, config_name: str = 'development'):
    """Build a Flask app whose db handle points at the given role's database

    ``role`` is ``service`` (bypasses row level security) or ``anon``.
    An explicit ``database_url`` wins over the configured one.
    """
    from crm_admin import create_app

    url = database_url or config_manager.get_database_url(role)
    if not url:
        setting = 'DATABASE_ANON_URL' if role == 'anon' else 'DATABASE_URL'
        raise ConfigurationError(f"{setting} is not set - add it to your .env file", setting)

    return create_app(config_name, database_url=url)

class DatabaseService:
    """Service for table inventory and schema inspection"""

    def create_tables(self):
        """Create mirror tables (local SQLite development only)"""
        try:
            db.create_all()
            logger.info("Database tables created successfully")
        except SQLAlchemyError as e:
            logger.error(f"Error creating database tables: {e}")
            raise

    def table_exists(self, table_name: str) -> bool:
        return inspect(db.engine).has_table(table_name)

    def count_rows(self, table_name: str) -> int:
        """Count rows of a table by name"""
        if table_name not in db.metadata.tables and not self.table_exists(table_name):
            raise DataValidationError(f"Unknown table: {table_name}", "table", table_name)

        # Table names come from CORE_TABLES or the mirror metadata, never user input
        result = db.session.execute(text(f'SELECT COUNT(*) FROM "{table_name}"'))
        return int(result.scalar() or 0)

    def table_inventory(self, tables: Optional[List[str]] = None) -> Dict[str, Dict]:
        """Row count per table; a failing table reports its error instead"""
        inventory = {}
        for table_name in tables or CORE_TABLES:
            try:
                inventory[table_name] = {'count': self.count_rows(table_name), 'error': None}
            except (SQLAlchemyError, DataValidationError) as e:
                db.session.rollback()
                logger.warning(f"Could not count {table_name}: {e}")
                inventory[table_name] = {'count': None, 'error': str(e)}
        return inventory

    def describe_table(self, table_name: str) -> List[Dict]:
        """Column names and types as the live database reports them"""
        columns = inspect(db.engine).get_columns(table_name)
        return [
            {
                'name': column['name'],
                'type': str(column['type']),
                'nullable': column.get('nullable', True),
            }
            for column in columns
        ]

    def sample_rows(self, table_name: str, limit: int = 5) -> List[Dict]:
        """First few rows of a table as dicts"""
        table = db.metadata.tables.get(table_name)
        if table is None:
            raise DataValidationError(f"Table {table_name} is not mirrored", "table", table_name)
        rows = db.session.execute(table.select().limit(limit)).mappings().all()
        return [dict(row) for row in rows]
