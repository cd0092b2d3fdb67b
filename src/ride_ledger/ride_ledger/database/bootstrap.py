from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from .connection import DatabaseConnection, DBConfig

logger = logging.getLogger(__name__)


def _strip_create_db_and_use(sql: str) -> str:
    # The target database comes from DB_CONFIG, not from the SQL file.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def iter_sql_statements(sql: str) -> Iterable[str]:
    """Split a schema/seed file on ';' outside of quoted strings; `--` comment lines are dropped."""
    sql = "\n".join(line for line in sql.splitlines() if not line.lstrip().startswith("--"))

    buf: list[str] = []
    quote: str | None = None
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue
        if ch == "\\" and quote:
            buf.append(ch)
            escape = True
            continue
        if ch in ("'", '"'):
            if quote is None:
                quote = ch
            elif quote == ch:
                quote = None
        if ch == ";" and quote is None:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue
        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(config: DBConfig) -> None:
    conn = DatabaseConnection(config).connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{config.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def _apply_sql_file(config: DBConfig, path: str | Path) -> int:
    sql = _strip_create_db_and_use(Path(path).read_text(encoding="utf-8"))
    conn = DatabaseConnection(config).connect()
    count = 0
    try:
        cur = conn.cursor()
        for stmt in iter_sql_statements(sql):
            cur.execute(stmt)
            count += 1
        conn.commit()
    finally:
        conn.close()
    return count


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    config = DBConfig.from_mapping(db_config)
    ensure_database_exists(config)
    count = _apply_sql_file(config, schema_path)
    logger.info("Applied %s (%d statements) to %s", Path(schema_path).name, count, config.describe())


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    config = DBConfig.from_mapping(db_config)
    count = _apply_sql_file(config, seed_path)
    logger.info("Applied %s (%d statements) to %s", Path(seed_path).name, count, config.describe())


def list_tables(db_config: dict) -> list[str]:
    conn = DatabaseConnection(DBConfig.from_mapping(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
