"""Row store backed by one JSON file per table.

Besides the whole-table helpers (``load_list`` / ``replace_all``) this module
exposes the row contract the services are written against: ``query``,
``get``, ``insert``, ``update``, ``soft_delete`` and ``delete``. Each call
reads and rewrites the table file, so every write is persisted on its own;
there are no multi-row transactions.
"""
import json
import logging
import os
import tempfile
import threading
import datetime as dt
from typing import List, Dict, Any, Optional

from domain.constants import TABLES
from services.errors import StoreError, NotFoundError
from utils.ids import create_id_with_prefix
from utils.settings import get_settings

logger = logging.getLogger(__name__)

DATA_DIR = os.path.normpath(get_settings().data_dir)

FILES = {table: f"{table}.json" for table in TABLES}

ID_PREFIXES = {
    'speakers': 'spk',
    'partners': 'prt',
    'teams': 'tm',
    'faq': 'faq',
    'about_images': 'abt',
    'admins': 'adm',
}

_RANGE_OPS = {
    'gt': lambda a, b: a > b,
    'gte': lambda a, b: a >= b,
    'lt': lambda a, b: a < b,
    'lte': lambda a, b: a <= b,
}

# Serializes read-modify-write cycles on the table files within this process.
_IO_LOCK = threading.RLock()


def utc_now_iso() -> str:
    return dt.datetime.now(dt.timezone.utc).isoformat().replace('+00:00', 'Z')


def _path(key: str) -> str:
    if key not in FILES:
        raise StoreError(f"Bilinmeyen tablo: {key}")
    return os.path.join(DATA_DIR, FILES[key])


def load_list(key: str) -> List[Dict[str, Any]]:
    file_path = _path(key)
    if not os.path.exists(file_path):
        return []
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error("failed to read table %s from %s", key, file_path, exc_info=True)
        raise StoreError(f"'{key}' tablosu okunamadı: {e}") from e
    if not isinstance(data, list):
        raise StoreError(f"'{key}' tablosu bozuk (liste bekleniyordu)")
    return data


def atomic_write(key: str, data: List[Dict[str, Any]]):
    file_path = _path(key)
    try:
        os.makedirs(os.path.dirname(file_path), exist_ok=True)
        tmp_fd, tmp_path = tempfile.mkstemp(
            prefix='tmp_', suffix='.json', dir=os.path.dirname(file_path))
        with os.fdopen(tmp_fd, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        os.replace(tmp_path, file_path)
    except OSError as e:
        logger.error("failed to write table %s to %s", key, file_path, exc_info=True)
        raise StoreError(f"'{key}' tablosu yazılamadı: {e}") from e


def replace_all(key: str, items: List[Dict[str, Any]]):
    with _IO_LOCK:
        atomic_write(key, items)


def _matches(row: Dict[str, Any], filters: Dict[str, Any]) -> bool:
    """Equality by default; ``field__op`` for gt/gte/lt/lte and ``field__is`` for None checks."""
    for key, expected in filters.items():
        field, _, op = key.partition('__')
        value = row.get(field)
        if not op:
            if value != expected:
                return False
        elif op == 'is':
            if expected is not None:
                raise StoreError(f"'{key}' filtresi yalnızca None ile kullanılabilir")
            if value is not None:
                return False
        elif op in _RANGE_OPS:
            if value is None or not _RANGE_OPS[op](value, expected):
                return False
        else:
            raise StoreError(f"Desteklenmeyen filtre: {key}")
    return True


def query(table: str, filters: Optional[Dict[str, Any]] = None, order_by: Optional[str] = None,
          descending: bool = False, include_deleted: bool = False,
          limit: Optional[int] = None) -> List[Dict[str, Any]]:
    rows = [r for r in load_list(table) if _matches(r, filters or {})]
    if not include_deleted:
        rows = [r for r in rows if not r.get('deleted_at')]
    if order_by:
        # Rows missing the column sort last regardless of direction
        present = [r for r in rows if r.get(order_by) is not None]
        missing = [r for r in rows if r.get(order_by) is None]
        present.sort(key=lambda r: r[order_by], reverse=descending)
        rows = present + missing
    if limit is not None:
        rows = rows[:limit]
    return [dict(r) for r in rows]


def get(table: str, row_id: str, include_deleted: bool = False) -> Optional[Dict[str, Any]]:
    row = next((r for r in load_list(table) if r.get('id') == row_id), None)
    if row is None or (row.get('deleted_at') and not include_deleted):
        return None
    return dict(row)


def insert(table: str, row: Dict[str, Any]) -> Dict[str, Any]:
    with _IO_LOCK:
        rows = load_list(table)
        new_row = dict(row)
        new_row.setdefault('id', create_id_with_prefix(ID_PREFIXES.get(table, table[:3])))
        new_row.setdefault('created_at', utc_now_iso())
        if any(r.get('id') == new_row['id'] for r in rows):
            raise StoreError(f"'{table}' tablosunda '{new_row['id']}' zaten mevcut")
        rows.append(new_row)
        atomic_write(table, rows)
    logger.debug("insert %s id=%s", table, new_row['id'])
    return dict(new_row)


def update(table: str, row_id: str, partial_row: Dict[str, Any]) -> Dict[str, Any]:
    with _IO_LOCK:
        rows = load_list(table)
        row = next((r for r in rows if r.get('id') == row_id), None)
        if row is None:
            raise NotFoundError(f"'{table}' tablosunda '{row_id}' bulunamadı")
        row.update({k: v for k, v in partial_row.items() if k != 'id'})
        atomic_write(table, rows)
    logger.debug("update %s id=%s fields=%s", table, row_id, sorted(partial_row))
    return dict(row)


def soft_delete(table: str, row_id: str) -> Dict[str, Any]:
    return update(table, row_id, {'deleted_at': utc_now_iso()})


def delete(table: str, row_id: str):
    with _IO_LOCK:
        rows = load_list(table)
        remaining = [r for r in rows if r.get('id') != row_id]
        if len(remaining) == len(rows):
            raise NotFoundError(f"'{table}' tablosunda '{row_id}' bulunamadı")
        atomic_write(table, remaining)
    logger.debug("delete %s id=%s", table, row_id)
