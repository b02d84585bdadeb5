"""Order index maintenance for ordered, soft-deletable tables.

Rows of an ordered table are partitioned into groups (partners by ``type``;
speakers and team members form a single group). Within a group the active
rows carry ``order_index`` values ``0..n-1`` with no gaps or duplicates.

Moving a row shifts every sibling between the old and the new position by
one, then writes the moved row. Each write is persisted on its own: if one
fails, the writes before it stay committed and a ``ReorderError`` names the
row that failed. ``repair_sequence`` renumbers a group after such a failure.

Mutations of one group are serialized by a per-group lock. This guards the
Streamlit sessions served by one process; separate processes writing the
same data directory are not coordinated.
"""
from __future__ import annotations

import logging
import threading
from contextlib import ExitStack
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from domain.constants import PARTNER_TYPES
from services import persistence
from services.errors import NotFoundError, ReorderError, StoreError, ValidationError

logger = logging.getLogger(__name__)

# Column that partitions each ordered table; None means one implicit group.
GROUP_FIELDS: Dict[str, Optional[str]] = {
    'speakers': None,
    'partners': 'type',
    'teams': None,
}

_LOCKS: Dict[tuple, threading.RLock] = {}
_LOCKS_GUARD = threading.Lock()


@dataclass
class SequenceReport:
    table: str
    group_key: Optional[str]
    size: int
    missing: List[int] = field(default_factory=list)
    duplicates: List[int] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.missing and not self.duplicates


def group_lock(table: str, group_key: Optional[str] = None) -> threading.RLock:
    key = (table, group_key)
    with _LOCKS_GUARD:
        lock = _LOCKS.get(key)
        if lock is None:
            lock = _LOCKS[key] = threading.RLock()
    return lock


def _group_field(table: str) -> Optional[str]:
    if table not in GROUP_FIELDS:
        raise ValidationError(f"'{table}' sıralanabilir bir tablo değil")
    return GROUP_FIELDS[table]


def group_filters(table: str, group_key: Optional[str] = None) -> Dict[str, Any]:
    column = _group_field(table)
    if column is None:
        return {}
    if group_key is None:
        raise ValidationError(f"'{table}' tablosu için grup anahtarı gerekli")
    return {column: group_key}


def group_of(table: str, row: Dict[str, Any]) -> Optional[str]:
    column = _group_field(table)
    return row.get(column) if column else None


def groups(table: str) -> List[Optional[str]]:
    """Every group key a table can hold."""
    column = _group_field(table)
    if column is None:
        return [None]
    if table == 'partners':
        return list(PARTNER_TYPES)
    keys = {r.get(column) for r in persistence.query(table)}
    return sorted(k for k in keys if k is not None)


def list_group(table: str, group_key: Optional[str] = None) -> List[Dict[str, Any]]:
    return persistence.query(table, group_filters(table, group_key), order_by='order_index')


def next_order_index(table: str, group_key: Optional[str] = None) -> int:
    top = persistence.query(table, group_filters(table, group_key),
                            order_by='order_index', descending=True, limit=1)
    if not top or top[0].get('order_index') is None:
        return 0
    return int(top[0]['order_index']) + 1


def append(table: str, row: Dict[str, Any]) -> Dict[str, Any]:
    """Insert ``row`` at the end of its group."""
    group_key = group_of(table, row)
    with group_lock(table, group_key):
        new_row = dict(row)
        new_row['order_index'] = next_order_index(table, group_key)
        return persistence.insert(table, new_row)


def _require_live(table: str, item_id: str) -> Dict[str, Any]:
    item = persistence.get(table, item_id)
    if item is None:
        raise NotFoundError(f"'{table}' tablosunda '{item_id}' bulunamadı")
    return item


def _shift(table: str, rows: List[Dict[str, Any]], delta: int, committed: List[str]):
    for row in rows:
        try:
            persistence.update(table, row['id'], {'order_index': int(row['order_index']) + delta})
        except StoreError as e:
            logger.error("order shift failed table=%s id=%s committed=%s",
                         table, row['id'], committed, exc_info=True)
            raise ReorderError(row['id'], committed, str(e)) from e
        committed.append(row['id'])


def reorder(table: str, item_id: str, new_index: int, group_key: Optional[str] = None) -> List[str]:
    """Move ``item_id`` to ``new_index`` within its group.

    Returns the ids written, in write order (empty when nothing moved).
    Raises ``ValidationError`` for an out-of-range index or a row from another
    group, ``NotFoundError`` for a missing/deleted row and ``ReorderError``
    when a write fails partway.
    """
    filters = group_filters(table, group_key)
    if isinstance(new_index, bool) or not isinstance(new_index, int):
        raise ValidationError(f"Geçersiz sıra değeri: {new_index!r}")

    with group_lock(table, group_key):
        item = _require_live(table, item_id)
        if group_of(table, item) != group_key:
            raise ValidationError(f"'{item_id}' kaydı '{group_key}' grubunda değil")
        old_index = item.get('order_index')
        if old_index is None:
            raise ValidationError(f"'{item_id}' kaydının sıra değeri yok; önce sıralamayı onarın")
        old_index = int(old_index)

        size = len(persistence.query(table, filters))
        if not 0 <= new_index < size:
            raise ValidationError(f"Sıra değeri 0 ile {size - 1} arasında olmalı (verilen: {new_index})")

        if new_index == old_index:
            logger.debug("reorder no-op table=%s id=%s index=%s", table, item_id, new_index)
            return []

        if old_index < new_index:
            siblings = persistence.query(
                table, {**filters, 'order_index__gt': old_index, 'order_index__lte': new_index},
                order_by='order_index')
            delta = -1
        else:
            siblings = persistence.query(
                table, {**filters, 'order_index__gte': new_index, 'order_index__lt': old_index},
                order_by='order_index', descending=True)
            delta = 1

        committed: List[str] = []
        _shift(table, siblings, delta, committed)
        try:
            persistence.update(table, item_id, {'order_index': new_index})
        except StoreError as e:
            logger.error("order write failed for moved row table=%s id=%s committed=%s",
                         table, item_id, committed, exc_info=True)
            raise ReorderError(item_id, committed, str(e)) from e
        committed.append(item_id)

    logger.info("reorder table=%s group=%s id=%s %s->%s shifted=%d",
                table, group_key, item_id, old_index, new_index, len(siblings))
    return committed


def close_gap(table: str, removed_index: int, group_key: Optional[str] = None) -> List[str]:
    """Shift every active row above ``removed_index`` down by one."""
    with group_lock(table, group_key):
        above = persistence.query(
            table, {**group_filters(table, group_key), 'order_index__gt': removed_index},
            order_by='order_index')
        committed: List[str] = []
        _shift(table, above, -1, committed)
    return committed


def soft_delete(table: str, item_id: str) -> Dict[str, Any]:
    """Soft-delete a row and compact the siblings that followed it.

    The row is read again under its group lock; a second delete of the same
    row raises ``NotFoundError`` instead of closing the gap twice.
    """
    while True:
        group_key = group_of(table, _require_live(table, item_id))
        with group_lock(table, group_key):
            item = _require_live(table, item_id)
            if group_of(table, item) != group_key:
                # Moved to another group meanwhile; take that group's lock instead
                continue
            deleted = persistence.soft_delete(table, item_id)
            if item.get('order_index') is not None:
                close_gap(table, int(item['order_index']), group_key)
            break
    logger.info("soft delete table=%s group=%s id=%s", table, group_key, item_id)
    return deleted


def move_to_group(table: str, item_id: str, new_group: str, changes: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Move a row to the end of another group and compact the group it left."""
    column = _group_field(table)
    if column is None:
        raise ValidationError(f"'{table}' tablosu gruplanmış değil")

    while True:
        old_group = _require_live(table, item_id).get(column)
        with ExitStack() as stack:
            # Fixed acquisition order so two opposite moves cannot deadlock
            for key in sorted({old_group, new_group}, key=lambda k: str(k)):
                stack.enter_context(group_lock(table, key))
            item = _require_live(table, item_id)
            if item.get(column) != old_group:
                continue
            if old_group == new_group:
                return persistence.update(table, item_id, dict(changes or {}))
            new_index = next_order_index(table, new_group)
            updated = persistence.update(
                table, item_id, {**(changes or {}), column: new_group, 'order_index': new_index})
            if item.get('order_index') is not None:
                close_gap(table, int(item['order_index']), old_group)
            break
    logger.info("group move table=%s id=%s %s->%s index=%s", table, item_id, old_group, new_group, new_index)
    return updated


def verify_sequence(table: str, group_key: Optional[str] = None) -> SequenceReport:
    indexes = [r.get('order_index') for r in list_group(table, group_key)]
    seen: Dict[int, int] = {}
    for idx in indexes:
        if idx is not None:
            seen[int(idx)] = seen.get(int(idx), 0) + 1
    size = len(indexes)
    return SequenceReport(
        table=table,
        group_key=group_key,
        size=size,
        missing=[i for i in range(size) if i not in seen],
        duplicates=sorted(i for i, count in seen.items() if count > 1),
    )


def repair_sequence(table: str, group_key: Optional[str] = None) -> int:
    """Renumber a group to ``0..n-1`` keeping the current relative order.

    Ties (duplicated indexes) are broken by ``created_at`` then ``id``; rows
    without an index go last. Returns how many rows were rewritten.
    """
    with group_lock(table, group_key):
        rows = persistence.query(table, group_filters(table, group_key))
        rows.sort(key=lambda r: (
            r.get('order_index') is None,
            r.get('order_index') if r.get('order_index') is not None else 0,
            r.get('created_at') or '',
            r.get('id') or '',
        ))
        changed = 0
        for position, row in enumerate(rows):
            if row.get('order_index') != position:
                persistence.update(table, row['id'], {'order_index': position})
                changed += 1
    if changed:
        logger.warning("repaired sequence table=%s group=%s rewritten=%d", table, group_key, changed)
    return changed
