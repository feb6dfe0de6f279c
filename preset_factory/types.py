"""All dataclasses, enums and error types for preset-factory."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MeshSize:
    """Geometry resolution presets are compiled against."""
    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------

@dataclass
class Preset:
    name: str
    format: str  # "milkdrop", or "idle" for the built-in idle preset
    mesh: MeshSize


@dataclass
class MilkdropPreset(Preset):
    parameters: dict[str, str] = field(default_factory=dict)
    sections: list[str] = field(default_factory=list)  # header names, e.g. "preset00"


# ---------------------------------------------------------------------------
# Load requests
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LoadRequest:
    """A resolved CreatePresetFromFile argument."""
    scheme: str  # "idle" or "file"
    target: str  # the string the caller passed in
    path: str | None = None
    extension: str | None = None


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class ErrorKind(str, Enum):
    NOT_INITIALIZED = "not_initialized"
    INVALID_MESH = "invalid_mesh"
    UNKNOWN_EXTENSION = "unknown_extension"
    UNSUPPORTED_SCHEME = "unsupported_scheme"
    MISSING_EXTENSION = "missing_extension"
    STREAM_OPEN_FAILURE = "stream_open_failure"
    PRESET_PARSE_FAILURE = "preset_parse_failure"


class PresetFactoryError(Exception):
    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        extension: str | None = None,
        path: str | None = None,
        scheme: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.extension = extension
        self.path = path
        self.scheme = scheme


class PresetParseError(ValueError):
    """Raised by factories when preset content cannot be parsed."""


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass
class LoaderConfig:
    version: str = "1.0"
    mesh: MeshSize = field(default_factory=lambda: MeshSize(32, 24))
    log_level: str = "WARNING"
