"""Configuration loading, validation, and defaults."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from .types import LoaderConfig, MeshSize

CONFIG_FILENAMES = [
    "preset-factory.yaml",
    "preset-factory.yml",
    "preset-factory.json",
]

DEFAULT_MESH = MeshSize(32, 24)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _discover_config() -> Path | None:
    """Search CWD then parent dirs up to home for a config file."""
    cwd = Path.cwd()
    home = Path.home()
    search = cwd
    while True:
        for name in CONFIG_FILENAMES:
            candidate = search / name
            if candidate.is_file():
                return candidate
        if search == home or search == search.parent:
            break
        search = search.parent
    return None


def _build_config(raw: dict[str, Any]) -> LoaderConfig:
    """Build a LoaderConfig from a raw dict."""
    mesh_raw = raw.get("mesh", {}) or {}
    mesh = MeshSize(
        width=int(mesh_raw.get("width", DEFAULT_MESH.width)),
        height=int(mesh_raw.get("height", DEFAULT_MESH.height)),
    )
    return LoaderConfig(
        version=str(raw.get("version", "1.0")),
        mesh=mesh,
        log_level=str(raw.get("log_level", "WARNING")).upper(),
    )


def validate_config(config: LoaderConfig) -> list[str]:
    """Validate a config. Returns list of error strings (empty = valid)."""
    errors: list[str] = []

    if config.mesh.width <= 0 or config.mesh.height <= 0:
        errors.append(f"mesh size must be positive, got {config.mesh}")

    if config.log_level not in LOG_LEVELS:
        errors.append(
            f"Unknown log_level '{config.log_level}' (expected one of {', '.join(LOG_LEVELS)})"
        )

    return errors


def configure_logging(config: LoaderConfig, verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def load_config(
    config_path: str | Path | None = None,
    config_dict: dict | None = None,
) -> LoaderConfig:
    """Load config from dict, explicit path, or auto-discover."""
    if config_dict is not None:
        return _build_config(config_dict)

    if config_path is not None:
        path = Path(config_path)
    else:
        path = _discover_config()

    if path is None:
        return _build_config({})

    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")

    text = path.read_text()
    if path.suffix == ".json":
        raw = json.loads(text)
    else:
        raw = yaml.safe_load(text) or {}

    return _build_config(raw)
