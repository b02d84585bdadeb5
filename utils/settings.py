"""Runtime settings for the dashboard.

Values come from environment variables (prefixed ``EVENT_ADMIN_``) and fall
back to local defaults so the app runs without any configuration.
"""
from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field, field_validator

_BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
ENV_PREFIX = 'EVENT_ADMIN_'


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    return os.environ.get(ENV_PREFIX + key, default)


class Settings(BaseModel):
    data_dir: str = Field(default=os.path.join(_BASE_DIR, 'data'))
    public_url: str = 'http://localhost:8501'
    max_upload_mb: int = 5
    log_level: str = 'INFO'

    @field_validator('public_url')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip('/')

    @field_validator('max_upload_mb')
    @classmethod
    def upload_limit_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError('max_upload_mb must be positive')
        return v

    @field_validator('log_level')
    @classmethod
    def known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}:
            raise ValueError(f'unknown log level: {v}')
        return level

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024


def load_settings() -> Settings:
    overrides = {
        'data_dir': _env('DATA_DIR'),
        'public_url': _env('PUBLIC_URL'),
        'max_upload_mb': _env('MAX_UPLOAD_MB'),
        'log_level': _env('LOG_LEVEL'),
    }
    return Settings(**{k: v for k, v in overrides.items() if v is not None})


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
