from __future__ import annotations

"""Configuration loading and validation for the timed quiz.

This module loads YAML configuration, applies defaults, and validates that
values are usable before a quiz starts.
"""

import math
from pathlib import Path
from typing import Any, Dict, Optional

import sys

import yaml

from ..errors import ConfigError
from ..runner.quiz_runner import DEFAULT_POLL_INTERVAL_S

DEFAULT_CSV_FILE = "problems.csv"
DEFAULT_DURATION_S = 30


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Config file is not valid YAML: {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")
    return data


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML or defaults.

    Args:
        path: Optional path to a YAML config. If None, use package defaults.

    Returns:
        A dictionary with configuration values.
    """
    if path:
        cfg = _load_yaml(Path(path))
    else:
        default_path = Path(__file__).with_name("defaults.yml")
        cfg = _load_yaml(default_path)
    return cfg


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number):
        return None
    return number


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Apply defaults and validate configuration values.

    Unusable values fall back to their defaults with a warning.

    Args:
        cfg: The raw configuration dictionary.

    Returns:
        The validated and merged configuration dictionary.
    """
    # Shallow defaults for missing sections
    cfg.setdefault("quiz", {})
    cfg.setdefault("runner", {})
    for section in ("quiz", "runner"):
        if cfg[section] is None:
            cfg[section] = {}
        if not isinstance(cfg[section], dict):
            raise ConfigError(f"Config section '{section}' must be a mapping")

    quiz = cfg["quiz"]
    runner = cfg["runner"]

    quiz.setdefault("csv_file", DEFAULT_CSV_FILE)
    quiz.setdefault("duration", DEFAULT_DURATION_S)
    quiz.setdefault("timed", True)
    runner.setdefault("poll_interval_s", DEFAULT_POLL_INTERVAL_S)

    if not isinstance(quiz.get("csv_file"), str) or not quiz["csv_file"]:
        print(f"WARNING: Invalid csv_file '{quiz.get('csv_file')}', using '{DEFAULT_CSV_FILE}'.", file=sys.stderr)
        quiz["csv_file"] = DEFAULT_CSV_FILE

    duration = _as_number(quiz.get("duration"))
    if duration is None:
        print(f"WARNING: Invalid duration '{quiz.get('duration')}', using {DEFAULT_DURATION_S}s.", file=sys.stderr)
        duration = float(DEFAULT_DURATION_S)
    quiz["duration"] = duration

    quiz["timed"] = bool(quiz.get("timed", True))

    poll = _as_number(runner.get("poll_interval_s"))
    if poll is None or poll <= 0:
        print(
            f"WARNING: Invalid poll_interval_s '{runner.get('poll_interval_s')}', using {DEFAULT_POLL_INTERVAL_S}.",
            file=sys.stderr,
        )
        poll = DEFAULT_POLL_INTERVAL_S
    runner["poll_interval_s"] = poll

    return cfg
