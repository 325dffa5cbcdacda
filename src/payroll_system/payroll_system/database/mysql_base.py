from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterable, List, Optional

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def encode_weekdays(days: Iterable[int]) -> str:
    """Weekday sets are stored as a comma separated column, e.g. '5,6'."""
    return ",".join(str(int(d)) for d in sorted(set(days)))


def decode_weekdays(value: Optional[str]) -> frozenset[int]:
    if not value:
        return frozenset()
    return frozenset(int(p) for p in str(value).split(",") if p.strip())
