"""MilkdropPresetFactory: ``.milk`` / ``.prjm`` INI-style presets."""

from __future__ import annotations

import logging
from pathlib import PurePath
from typing import BinaryIO

from ..types import MilkdropPreset, MeshSize, PresetParseError
from .base import PresetFactory

logger = logging.getLogger(__name__)

MILKDROP_EXTENSIONS = ("milk", "prjm")


def parse_milk(text: str, name: str, mesh: MeshSize, format_name: str = "milkdrop") -> MilkdropPreset:
    """Parse Milkdrop preset text into a MilkdropPreset.

    Accepts ``[section]`` headers, ``key=value`` lines, blank lines and ``//``
    comments. Later keys overwrite earlier ones.
    """
    parameters: dict[str, str] = {}
    sections: list[str] = []

    for lineno, raw in enumerate(text.splitlines(), 1):
        line = raw.strip()
        if not line or line.startswith("//"):
            continue
        if line.startswith("[") and line.endswith("]"):
            sections.append(line[1:-1].strip())
            continue
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key:
            raise PresetParseError(f"line {lineno}: expected key=value, got {raw.strip()!r}")
        parameters[key] = value.strip()

    if not parameters:
        raise PresetParseError(f"preset '{name}' has no parameters")

    return MilkdropPreset(
        name=name,
        format=format_name,
        mesh=mesh,
        parameters=parameters,
        sections=sections,
    )


def _stream_name(stream: BinaryIO) -> str:
    name = getattr(stream, "name", None)
    if isinstance(name, str) and name:
        return PurePath(name).stem
    return "<stream>"


class MilkdropPresetFactory(PresetFactory):
    """Factory for Milkdrop presets; registered under every MILKDROP_EXTENSIONS tag."""

    def __init__(self, mesh: MeshSize) -> None:
        super().__init__(mesh)
        logger.debug("Milkdrop preset factory built for mesh %s", mesh)

    @property
    def extensions(self) -> tuple[str, ...]:
        return MILKDROP_EXTENSIONS

    def load_preset_from_stream(self, stream: BinaryIO) -> MilkdropPreset:
        if self.closed:
            raise PresetParseError("factory has been closed")

        data = stream.read()
        if isinstance(data, bytes):
            text = data.decode("utf-8", errors="replace")
        else:
            text = data

        name = _stream_name(stream)
        preset = parse_milk(text, name, self.mesh)
        logger.debug(
            "Parsed preset %s: %d parameters, %d sections",
            name, len(preset.parameters), len(preset.sections),
        )
        return preset

    def close(self) -> None:
        super().close()
        logger.debug("Milkdrop preset factory for mesh %s closed", self.mesh)
