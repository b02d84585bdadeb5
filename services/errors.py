"""Error types raised by the service layer.

Views catch these and show ``str(e)`` to the admin; every message is already
localized. ``ValidationError`` subclasses ``ValueError`` so existing
``except ValueError`` handlers keep working.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import List, Optional


class ValidationError(ValueError):
    """Input rejected before any store call."""


class AuthError(ValueError):
    """Bad credentials or duplicate account."""


class StoreError(Exception):
    """A single row or object store call failed."""


class NotFoundError(StoreError):
    """The referenced row does not exist (or is soft-deleted)."""


class ReorderError(StoreError):
    """A re-sequencing write failed partway through.

    No rollback happens: ``committed_ids`` lists the rows whose new
    ``order_index`` was already persisted before ``failed_item_id`` failed.
    """

    def __init__(self, failed_item_id: str, committed_ids: Optional[List[str]] = None, reason: str = ''):
        self.failed_item_id = failed_item_id
        self.committed_ids = list(committed_ids or [])
        self.reason = reason
        message = f"Sıralama güncellenirken '{failed_item_id}' kaydı güncellenemedi"
        if reason:
            message += f": {reason}"
        if self.committed_ids:
            message += f" (önceden kaydedilenler: {', '.join(self.committed_ids)}; sıralama onarımı gerekli)"
        super().__init__(message)


@contextmanager
def reraise(message: str):
    """Prefix store failures with an action-specific message.

    Validation and reorder errors pass through untouched so callers keep
    their details.
    """
    try:
        yield
    except ReorderError:
        raise
    except StoreError as e:
        raise e.__class__(f"{message}: {e}") from e
