import sys
from pathlib import Path

import pytest

# Ensure 'src' directory is on sys.path for tests
PROJECT_ROOT = Path(__file__).resolve().parent
SRC_DIR = PROJECT_ROOT / 'src'
if SRC_DIR.exists() and str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


@pytest.fixture(autouse=True)
def _isolate_inspector_env(monkeypatch):
    for name in ("MAPINSPECT_MAX_HEIGHT_FRACTION", "MAPINSPECT_ON_REENTRANT", "MAPINSPECT_APP_NAME"):
        monkeypatch.delenv(name, raising=False)
