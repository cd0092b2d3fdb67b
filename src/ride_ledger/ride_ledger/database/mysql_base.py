from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple, TypeVar

from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

T = TypeVar("T")
Row = Dict[str, Any]


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, commit: bool = True) -> Iterator[Any]:
    """Dictionary cursor on a fresh connection; one transaction per block."""
    conn = conn_factory.connect()
    cur = conn.cursor(dictionary=True)
    try:
        yield cur
        if commit:
            conn.commit()
    except Exception:
        logger.warning("Rolling back transaction on %s", conn_factory.config.describe())
        conn.rollback()
        raise
    finally:
        cur.close()
        conn.close()


def fetch_one(cur, mapper: Callable[[Row], T]) -> Optional[T]:
    row = cur.fetchone()
    return mapper(row) if row else None


def fetch_all(cur, mapper: Callable[[Row], T]) -> List[T]:
    return [mapper(row) for row in cur.fetchall() or []]


def build_update(table: str, key_column: str, key: Any, fields: Dict[str, Any], allowed: Iterable[str]) -> Tuple[str, tuple]:
    """UPDATE statement for the whitelisted columns present in `fields`."""
    columns = [c for c in allowed if c in fields]
    if not columns:
        raise ValueError(f"No updatable columns for {table}: {sorted(fields)!r}")
    assignments = ", ".join(f"{c}=%s" for c in columns)
    sql = f"UPDATE {table} SET {assignments} WHERE {key_column}=%s"
    return sql, tuple(fields[c] for c in columns) + (key,)
