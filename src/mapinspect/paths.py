from __future__ import annotations

import os
from importlib import resources as ilr
from pathlib import Path

from platformdirs import user_config_dir as _uc

# ---------------------------------------------------------------------------
# User directories
# ---------------------------------------------------------------------------

def _app_name(default: str) -> str:
    return os.getenv("MAPINSPECT_APP_NAME", default)

def user_config_dir(app_name: str = "mapinspect") -> Path:
    app = _app_name(app_name)
    return Path(_uc(appname=app)).resolve()

def user_config_file(app_name: str = "mapinspect") -> Path:
    return user_config_dir(app_name) / "inspector.ini"

# ---------------------------------------------------------------------------
# Package-installed defaults
# ---------------------------------------------------------------------------

def default_data_dir(package: str = "mapinspect") -> Path:
    return Path(str(ilr.files(package))) / "data"

def default_presets_file(package: str = "mapinspect") -> Path:
    return default_data_dir(package) / "editors.yaml"
