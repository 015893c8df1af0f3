"""
Interpreter configuration: packaged YAML defaults plus an optional user file.

load_config() reads data/defaults.yaml, overlays the user's YAML file if one
is given (explicitly or through the BFVM_CONFIG environment variable),
validates every field and returns a frozen InterpreterConfig. All problems
found are reported together in a single ValueError.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, cast

import yaml

logger = logging.getLogger(__name__)

_DEFAULTS_PATH = Path(__file__).parent / "data" / "defaults.yaml"

CONFIG_ENV_VAR = "BFVM_CONFIG"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class InterpreterConfig:
    """
    Settings for one interpreter run.

    Attributes:
        tape_size: Number of cells on the tape.
        check_loops_upfront: Validate loop brackets before execution starts.
        completion_message: Text the driver prints after a successful run.
        log_level: Logging level name for the driver.
    """

    tape_size: int = 30000
    check_loops_upfront: bool = False
    completion_message: str = "Successfully completed program"
    log_level: str = "WARNING"


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Config file not found: {path}") from None
    except yaml.YAMLError as exc:
        raise ValueError(f"Failed to parse config file {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return cast(dict[str, Any], data)


def _validate(data: dict[str, Any]) -> list[str]:
    errors: list[str] = []
    known = set(InterpreterConfig.__dataclass_fields__)
    for key in sorted(set(data) - known):
        errors.append(f"unknown key {key!r}")

    tape_size = data.get("tape_size")
    # bool is an int subclass; reject it explicitly.
    if not isinstance(tape_size, int) or isinstance(tape_size, bool) or tape_size <= 0:
        errors.append(f"tape_size must be a positive integer, got {tape_size!r}")
    if not isinstance(data.get("check_loops_upfront"), bool):
        errors.append(
            f"check_loops_upfront must be true or false, got {data.get('check_loops_upfront')!r}"
        )
    if not isinstance(data.get("completion_message"), str):
        errors.append(
            f"completion_message must be a string, got {data.get('completion_message')!r}"
        )
    log_level = data.get("log_level")
    if not isinstance(log_level, str) or log_level.upper() not in _LOG_LEVELS:
        errors.append(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {log_level!r}")
    return errors


def load_config(
    path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> InterpreterConfig:
    """
    Build an InterpreterConfig.

    Parameters
    ----------
    path:
        User YAML file to overlay on the defaults. When None, the file named
        by the BFVM_CONFIG environment variable is used if set.
    overrides:
        Values applied last, e.g. from command-line flags. Keys whose value
        is None are ignored.

    Raises
    ------
    FileNotFoundError
        If the user config file does not exist.
    ValueError
        If a file cannot be parsed or any field is invalid.
    """
    data = _load_yaml(_DEFAULTS_PATH)

    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            path = env_path
    if path is not None:
        logger.debug("Loading config overlay from %s", path)
        data.update(_load_yaml(Path(path)))

    if overrides:
        data.update({key: value for key, value in overrides.items() if value is not None})

    errors = _validate(data)
    if errors:
        raise ValueError(
            "Invalid interpreter configuration:\n" + "\n".join(f"  • {e}" for e in errors)
        )

    return InterpreterConfig(
        tape_size=data["tape_size"],
        check_loops_upfront=data["check_loops_upfront"],
        completion_message=data["completion_message"],
        log_level=data["log_level"].upper(),
    )
