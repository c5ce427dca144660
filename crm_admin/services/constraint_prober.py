"""
Constraint prober - find out which values a CHECK constraint accepts

The hosted database does not let us read constraint definitions with the
keys the scripts use, so we ask it: insert (or update) a row with each
candidate value, keep the ones that go through and remove the evidence.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

import sqlalchemy as sa
from sqlalchemy.exc import IntegrityError, NoSuchTableError, SQLAlchemyError

from crm_admin.exceptions import ProbeError
from crm_admin.models import db

logger = logging.getLogger(__name__)

class ProbeResult:
    """Outcome of one probe run"""

    def __init__(self):
        self.accepted: List[Any] = []
        self.rejected: Dict[Any, str] = {}
        self.errors: Dict[Any, str] = {}
        self.check_violations: List[Any] = []
        self.leftovers: List[Any] = []

    @property
    def is_clean(self) -> bool:
        """True when every probe row was cleaned up"""
        return not self.leftovers

    def is_accepted(self, value) -> bool:
        return value in self.accepted

    def to_dict(self):
        return {
            'accepted': list(self.accepted),
            'rejected': dict(self.rejected),
            'errors': dict(self.errors),
            'check_violations': list(self.check_violations),
            'leftovers': list(self.leftovers),
        }

def _error_message(error: Exception) -> str:
    """Driver message without SQLAlchemy's statement dump"""
    original = getattr(error, 'orig', None)
    return str(original if original is not None else error).strip()

def is_check_violation(message: str) -> bool:
    # Postgres: 'violates check constraint', SQLite: 'CHECK constraint failed'
    return 'check constraint' in (message or '').lower()

def probe_values(candidates: Iterable[Any],
                 attempt: Callable[[Any], Any],
                 cleanup: Optional[Callable[[Any], None]] = None,
                 is_rejection: Optional[Callable[[Exception], bool]] = None) -> ProbeResult:
    """Try each candidate and return the accepted subset

    ``attempt(value)`` performs the side effect and returns a handle for
    ``cleanup(handle)``. An exception from ``attempt`` marks the value as
    rejected when ``is_rejection`` says so (all exceptions by default),
    otherwise as an error. Cleanup failures never abort the run; their
    handles end up in ``leftovers``.
    """
    result = ProbeResult()
    seen = []

    for value in candidates:
        if value in seen:
            continue
        seen.append(value)

        try:
            handle = attempt(value)
        except Exception as e:
            message = _error_message(e)
            if is_rejection is None or is_rejection(e):
                result.rejected[value] = message
                if is_check_violation(message):
                    result.check_violations.append(value)
                logger.debug(f"Probe value {value!r} rejected: {message}")
            else:
                result.errors[value] = message
                logger.warning(f"Probe value {value!r} failed: {message}")
            continue

        result.accepted.append(value)

        if cleanup is None:
            continue
        try:
            cleanup(handle)
        except Exception as e:
            result.leftovers.append(handle)
            logger.error(f"Cleanup after probing {value!r} failed, row {handle!r} left behind: {_error_message(e)}")

    return result

class ConstraintProber:
    """Runs probes against one table through the db session"""

    def __init__(self, table_name: str, session=None):
        self.table_name = table_name
        self.session = session or db.session
        self.table = self._resolve_table(table_name)

        primary_key = list(self.table.primary_key.columns)
        if len(primary_key) != 1:
            raise ProbeError(f"Table {table_name} needs a single column primary key to clean up probes", table_name)
        self.pk_column = primary_key[0]

    def _resolve_table(self, table_name: str) -> sa.Table:
        """Use the mirrored model table, else reflect the live one"""
        table = db.metadata.tables.get(table_name)
        if table is not None:
            return table

        try:
            return sa.Table(table_name, sa.MetaData(), autoload_with=self.session.get_bind())
        except NoSuchTableError:
            raise ProbeError(f"Table {table_name} does not exist", table_name)

    def _require_field(self, field: str):
        if field not in self.table.c:
            raise ProbeError(f"Table {self.table_name} has no column {field}", self.table_name, field)

    def _run(self, statement):
        """Execute and commit, rolling back on any database error"""
        try:
            result = self.session.execute(statement)
            self.session.commit()
            return result
        except SQLAlchemyError:
            self.session.rollback()
            raise

    def probe_insert(self, field: str, candidates: Iterable[Any], template: Dict[str, Any]) -> ProbeResult:
        """Insert ``template`` once per candidate with ``field`` replaced, then delete the row"""
        self._require_field(field)

        def attempt(value):
            record = dict(template)
            record[field] = value
            result = self._run(self.table.insert().values(**record))
            row_id = result.inserted_primary_key[0] if result.inserted_primary_key else None
            if row_id is None:
                row_id = record.get(self.pk_column.name)
            return row_id

        def cleanup(row_id):
            if row_id is None:
                raise ProbeError("Database did not report the inserted primary key", self.table_name)
            self._run(self.table.delete().where(self.pk_column == row_id))

        logger.info(f"Probing {self.table_name}.{field} by insert")
        return probe_values(candidates, attempt, cleanup,
                            is_rejection=lambda e: isinstance(e, IntegrityError))

    def probe_update(self, field: str, candidates: Iterable[Any], row_id: Any = None) -> ProbeResult:
        """Set ``field`` on an existing row to each candidate, restoring the original after each success"""
        self._require_field(field)

        if row_id is None:
            row_id = self.session.execute(sa.select(self.pk_column).limit(1)).scalar()
            if row_id is None:
                raise ProbeError(f"Update probing needs at least one row in {self.table_name}", self.table_name, field)

        # Columns like updated_at would otherwise be stamped by every trial update
        pinned = [c for c in self.table.c if c.onupdate is not None and c.name != field]
        row = self.session.execute(
            sa.select(self.table.c[field], *pinned).where(self.pk_column == row_id)
        ).first()
        if row is None:
            raise ProbeError(f"No {self.table_name} row with id {row_id}", self.table_name, field)
        original = row[0]
        pinned_values = {c.name: value for c, value in zip(pinned, row[1:])}

        def attempt(value):
            values = dict(pinned_values)
            values[field] = value
            self._run(self.table.update().where(self.pk_column == row_id).values(values))
            return row_id

        def cleanup(target_id):
            values = dict(pinned_values)
            values[field] = original
            self._run(self.table.update().where(self.pk_column == target_id).values(values))

        logger.info(f"Probing {self.table_name}.{field} by update on row {row_id}")
        return probe_values(candidates, attempt, cleanup,
                            is_rejection=lambda e: isinstance(e, IntegrityError))
