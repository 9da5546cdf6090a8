"""
docset/index_store.py — indeks wyszukiwania docsetu (SQLite docSet.dsidx).

Tabela searchIndex ma unikalny indeks (name, type, path); duplikaty są
pomijane przez INSERT OR IGNORE, więc silnik ekstrakcji nie musi
deduplikować referencji.
"""

from __future__ import annotations

import pathlib
import sqlite3
from collections.abc import Iterable

from data_model.documents import Reference

_SCHEMA_SQL = """
    CREATE TABLE searchIndex(id INTEGER PRIMARY KEY, name TEXT, type TEXT, path TEXT);
    CREATE UNIQUE INDEX anchor ON searchIndex (name, type, path);
"""

_INSERT_SQL = """
    INSERT OR IGNORE INTO searchIndex (name, type, path)
    VALUES (?, ?, ?)
"""


def get_connection(db_path: pathlib.Path) -> sqlite3.Connection:
    return sqlite3.connect(db_path)


def create_index(db_path: pathlib.Path) -> sqlite3.Connection:
    """
    Tworzy pusty indeks. Poprzedni plik (z wcześniejszego budowania) jest usuwany.

    Raises:
        sqlite3.Error / OSError gdy bazy nie da się utworzyć.
    """
    db_path.unlink(missing_ok=True)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = get_connection(db_path)
    try:
        conn.executescript(_SCHEMA_SQL)
    except sqlite3.Error:
        conn.close()
        raise
    return conn


def insert_references(conn: sqlite3.Connection, refs: Iterable[Reference]) -> int:
    """
    Dopisuje referencje do searchIndex.

    Returns:
        Liczba nowych wierszy (duplikaty (name, type, path) nie są liczone).
    """
    rows = [(r.name, r.type, r.href) for r in refs]
    if not rows:
        return 0

    before = conn.total_changes
    with conn:
        conn.executemany(_INSERT_SQL, rows)
    return conn.total_changes - before


def count_entries(conn: sqlite3.Connection) -> int:
    (n,) = conn.execute("SELECT COUNT(*) FROM searchIndex").fetchone()
    return n
