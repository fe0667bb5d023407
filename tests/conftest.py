import os
import sys

import pytest

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Redirect local storage to a temp dir and drop the simulated latency."""
    d = tmp_path / 'data'
    d.mkdir()
    monkeypatch.setattr('utils.config.DATA_DIR', str(d))
    monkeypatch.setattr('utils.config.SIMULATED_DELAY', 0)
    return d
