import pytest

from services import persistence


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point the row store (and the buckets under it) at an empty temp directory."""
    monkeypatch.setattr(persistence, 'DATA_DIR', str(tmp_path))
    return tmp_path
