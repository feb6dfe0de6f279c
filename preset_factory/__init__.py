"""preset-factory: extension-keyed preset factory registry and loader."""

from .config import load_config
from .manager import PresetFactoryManager
from .registry import FactoryRegistry
from .types import (
    ErrorKind,
    LoadRequest,
    LoaderConfig,
    MeshSize,
    MilkdropPreset,
    Preset,
    PresetFactoryError,
    PresetParseError,
)

__version__ = "0.1.0"

__all__ = [
    "PresetFactoryManager",
    "FactoryRegistry",
    "load_config",
    "ErrorKind",
    "LoadRequest",
    "LoaderConfig",
    "MeshSize",
    "MilkdropPreset",
    "Preset",
    "PresetFactoryError",
    "PresetParseError",
]
