from __future__ import annotations

import configparser
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Literal

from .errors import ConfigError
from .paths import user_config_file

logger = logging.getLogger(__name__)

SECTION = "inspector"
ENV_MAX_HEIGHT_FRACTION = "MAPINSPECT_MAX_HEIGHT_FRACTION"
ENV_ON_REENTRANT = "MAPINSPECT_ON_REENTRANT"

ReentrantPolicy = Literal["reject", "cancel"]
_REENTRANT_POLICIES = ("reject", "cancel")


@dataclass(frozen=True)
class InspectorConfig:
    """Tunable inspector behaviour.

    ``max_height_fraction`` is the share of the container height the popup
    may grow to.  ``on_reentrant`` decides what :meth:`InspectorPopup.inspect`
    does while a session is already open: ``"reject"`` raises
    :class:`~mapinspect.errors.SessionActiveError`, ``"cancel"`` cancels the
    live session first.
    """

    max_height_fraction: float = 0.9
    on_reentrant: ReentrantPolicy = "reject"

    def __post_init__(self) -> None:
        if not 0 < self.max_height_fraction <= 1:
            raise ConfigError(
                f"max_height_fraction must be in (0, 1], got {self.max_height_fraction!r}"
            )
        if self.on_reentrant not in _REENTRANT_POLICIES:
            raise ConfigError(
                f"on_reentrant must be one of {_REENTRANT_POLICIES}, got {self.on_reentrant!r}"
            )


# ---------------------------------------------------------------------------
# Reading helpers
# ---------------------------------------------------------------------------

def _parse_fraction(raw: str, source: str) -> float:
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigError(f"{source}: invalid max_height_fraction {raw!r}") from exc


def _read_ini(path: Path) -> dict[str, str]:
    parser = configparser.ConfigParser()
    try:
        parser.read(path, encoding="utf-8")
    except (configparser.Error, UnicodeDecodeError, OSError) as exc:
        logger.warning("Failed to read config %s: %s", path, exc)
        return {}
    if not parser.has_section(SECTION):
        return {}
    return dict(parser.items(SECTION))


def load_config(path: str | Path | None = None) -> InspectorConfig:
    """Load :class:`InspectorConfig` from *path* and the environment.

    When *path* is ``None`` the per-user ``inspector.ini`` is used if it
    exists.  Environment variables take precedence over file values.
    """

    cfg_path = Path(path) if path is not None else user_config_file()
    values = _read_ini(cfg_path) if cfg_path.exists() else {}
    config = InspectorConfig()
    if "max_height_fraction" in values:
        config = replace(
            config,
            max_height_fraction=_parse_fraction(values["max_height_fraction"], str(cfg_path)),
        )
    if "on_reentrant" in values:
        config = replace(config, on_reentrant=values["on_reentrant"].strip().lower())  # type: ignore[arg-type]

    env_fraction = os.environ.get(ENV_MAX_HEIGHT_FRACTION)
    if env_fraction:
        config = replace(
            config, max_height_fraction=_parse_fraction(env_fraction, ENV_MAX_HEIGHT_FRACTION)
        )
    env_policy = os.environ.get(ENV_ON_REENTRANT)
    if env_policy:
        config = replace(config, on_reentrant=env_policy.strip().lower())  # type: ignore[arg-type]
    logger.debug("loaded inspector config %s", config)
    return config


__all__ = ["InspectorConfig", "load_config"]
