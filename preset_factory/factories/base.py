"""PresetFactory ABC: one preset file format, parsed from a byte stream."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import BinaryIO

from ..types import MeshSize, Preset


class PresetFactory(ABC):
    """Base class for format-specific preset factories.

    A factory is built for one mesh size. The registry never resizes a factory
    in place; a mesh change closes it and builds a new one.
    """

    def __init__(self, mesh: MeshSize) -> None:
        self.mesh = mesh
        self.closed = False

    @property
    @abstractmethod
    def extensions(self) -> tuple[str, ...]:
        """Extension tags this factory handles (e.g. ('milk', 'prjm'))."""

    @abstractmethod
    def load_preset_from_stream(self, stream: BinaryIO) -> Preset:
        """Parse a preset from ``stream``. Must not close or rewind it."""

    def close(self) -> None:
        """Release resources held by the factory."""
        self.closed = True
