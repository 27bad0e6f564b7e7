"""Simple configuration loader for maze_solver."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

from .search.policy import FScorePolicy


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class SearchConfig:
    """Configuration values for the search section."""

    f_score_policy: FScorePolicy = FScorePolicy.CORRECTED


@dataclass
class LoggingConfig:
    """Log levels applied by :func:`maze_solver.utils.logging_setup.configure_logging`."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    search: SearchConfig
    logging: LoggingConfig


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    search_data = data.get("search") or {}
    policy_name = str(search_data.get("f_score_policy", FScorePolicy.CORRECTED.value))
    try:
        policy = FScorePolicy(policy_name.lower())
    except ValueError:
        choices = ", ".join(p.value for p in FScorePolicy)
        raise ValueError(
            f"Unknown f_score_policy '{policy_name}' (expected one of: {choices})"
        ) from None
    search = SearchConfig(f_score_policy=policy)

    logging_data = data.get("logging") or {}
    log_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(search=search, logging=log_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "SearchConfig",
    "LoggingConfig",
    "load_config",
]
