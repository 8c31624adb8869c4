"""
Schema bootstrap for registered record types.

Create-or-alter semantics:
- table missing: CREATE TABLE (with its indexes)
- table present: ADD COLUMN for every mapped column the table lacks

Nothing is ever dropped or narrowed, so running it again is a no-op and
tables of other record types are never touched.
"""

import logging

from alembic.migration import MigrationContext
from alembic.operations import Operations
from sqlalchemy import Column, inspect
from sqlalchemy.engine import Connection

logger = logging.getLogger(__name__)


def _addable_copy(column: Column) -> Column:
    # Existing rows have no value for the new column
    server_default = column.server_default.arg if column.server_default is not None else None
    return Column(column.name, column.type, nullable=True, server_default=server_default)


def auto_migrate(connection: Connection, model: type) -> list[str]:
    """
    Bring the table of model up to date on connection.

    Returns:
        Names of the columns that were added (all of them for a new table)
    """
    table = inspect(model).local_table
    inspector = inspect(connection)

    if not inspector.has_table(table.name, schema=table.schema):
        table.create(bind=connection)
        logger.info(f"Created table {table.name}")
        return [column.name for column in table.columns]

    existing = {column["name"] for column in inspector.get_columns(table.name, schema=table.schema)}
    missing = [column for column in table.columns if column.name not in existing]
    if not missing:
        return []

    operations = Operations(MigrationContext.configure(connection))
    for column in missing:
        operations.add_column(table.name, _addable_copy(column), schema=table.schema)

    added = [column.name for column in missing]
    logger.info(f"Added columns to {table.name}: {', '.join(added)}")
    return added
