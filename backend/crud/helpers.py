"""
Helper functions shared by the cosmetic CRUD modules.

These build dialect-specific atomic upserts and decode nullable columns with
explicit defaults.
"""

from typing import Any, Dict, Optional, Sequence

from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.sql import Executable


def build_upsert(
    dialect_name: str,
    model,
    values: Dict[str, Any],
    key_columns: Sequence[str],
) -> Executable:
    """
    Build a single-statement "insert, on key conflict update" for a model.

    Every non-key column in values is overwritten on conflict, so the
    statement is idempotent per key and never produces a duplicate row.

    Args:
        dialect_name: Name of the SQLAlchemy dialect ("sqlite", "postgresql", "mysql")
        model: Declarative model class of the target table
        values: Column -> value mapping for the row
        key_columns: Columns forming the table's unique key

    Returns:
        Executable insert statement

    Raises:
        ValueError: If the dialect has no native upsert support here
    """
    update_columns = [name for name in values if name not in key_columns]

    if dialect_name in ("sqlite", "postgresql"):
        insert = sqlite.insert if dialect_name == "sqlite" else postgresql.insert
        stmt = insert(model).values(**values)
        if not update_columns:
            return stmt.on_conflict_do_nothing(index_elements=list(key_columns))
        return stmt.on_conflict_do_update(
            index_elements=list(key_columns),
            set_={name: stmt.excluded[name] for name in update_columns},
        )

    if dialect_name in ("mysql", "mariadb"):
        stmt = mysql.insert(model).values(**values)
        if not update_columns:
            # Re-assigning a key column to itself turns a duplicate into a no-op
            first_key = key_columns[0]
            return stmt.on_duplicate_key_update({first_key: stmt.inserted[first_key]})
        return stmt.on_duplicate_key_update({name: stmt.inserted[name] for name in update_columns})

    raise ValueError(f"No upsert support for dialect '{dialect_name}'")


def int_or_default(value: Any, default: int = 0) -> int:
    """Decode a nullable integer column."""
    if value is None:
        return default
    return int(value)


def float_or_default(value: Any, default: float = 0.0) -> float:
    """Decode a nullable float column."""
    if value is None:
        return default
    return float(value)


def str_or_default(value: Any, default: Optional[str] = None) -> Optional[str]:
    """Decode a nullable string column; empty strings count as missing."""
    if value is None or value == "":
        return default
    return str(value)
