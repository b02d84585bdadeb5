"""Dashboard admin accounts: sign-up, login and logout.

Passwords are stored as ``pbkdf2_sha256$<iterations>$<salt>$<hash>``.
Session state (who is logged in) belongs to the caller; ``log_out`` only
clears the keys it is handed.
"""
from __future__ import annotations

import base64
import hashlib
import hmac
import logging
import re
import secrets
from typing import MutableMapping

from domain.models import Admin, admin_from_dict
from services import persistence
from services.errors import AuthError, reraise

logger = logging.getLogger(__name__)

TABLE = 'admins'
ITERATIONS = 260_000
MIN_PASSWORD_LENGTH = 6
SESSION_KEYS = ('admin_id', 'admin_email')

_EMAIL_RE = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')


def hash_password(password: str, salt: str | None = None, iterations: int = ITERATIONS) -> str:
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac('sha256', password.encode('utf-8'), salt.encode('utf-8'), iterations)
    return f"pbkdf2_sha256${iterations}${salt}${base64.b64encode(digest).decode('ascii')}"


def verify_password(password: str, encoded: str) -> bool:
    try:
        algorithm, iterations, salt, _ = encoded.split('$', 3)
    except ValueError:
        return False
    if algorithm != 'pbkdf2_sha256':
        return False
    candidate = hash_password(password, salt=salt, iterations=int(iterations))
    return hmac.compare_digest(candidate, encoded)


def _normalize_email(email: str) -> str:
    return (email or '').strip().lower()


def _find(email: str):
    rows = persistence.query(TABLE, {'email': email})
    return rows[0] if rows else None


def sign_up(email: str, password: str) -> Admin:
    email = _normalize_email(email)
    if not _EMAIL_RE.match(email):
        raise AuthError("Geçerli bir e-posta adresi giriniz")
    if len(password or '') < MIN_PASSWORD_LENGTH:
        raise AuthError(f"Şifre en az {MIN_PASSWORD_LENGTH} karakter olmalıdır")
    with reraise("Kayıt sırasında bir hata oluştu"):
        if _find(email):
            raise AuthError("Bu e-posta adresi zaten kayıtlı")
        row = persistence.insert(TABLE, {'email': email, 'password_hash': hash_password(password)})
    logger.info("admin signed up id=%s", row['id'])
    return admin_from_dict(row)


def log_in(email: str, password: str) -> Admin:
    email = _normalize_email(email)
    with reraise("Giriş sırasında bir hata oluştu"):
        row = _find(email)
    if row is None or not verify_password(password or '', row.get('password_hash', '')):
        logger.warning("failed login for %s", email)
        raise AuthError("E-posta veya şifre hatalı")
    logger.info("admin logged in id=%s", row['id'])
    return admin_from_dict(row)


def start_session(session: MutableMapping, admin: Admin):
    session['admin_id'] = admin.id
    session['admin_email'] = admin.email


def log_out(session: MutableMapping) -> bool:
    was_logged_in = 'admin_id' in session
    for key in SESSION_KEYS:
        if key in session:
            del session[key]
    return was_logged_in


def has_admins() -> bool:
    return bool(persistence.query(TABLE, limit=1))
