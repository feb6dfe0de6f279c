"""PresetFactoryManager: resolve a path, URL or stream to a factory and load a preset.

Supported targets:
    idle://<anything>   the built-in idle preset (no file, no extension lookup)
    file://<path>       a preset file
    <path>              same as file://<path>
"""

from __future__ import annotations

from pathlib import PurePath
from typing import BinaryIO, Sequence

from .factories.base import PresetFactory
from .factories.idle import load_idle_preset
from .registry import FactoryBuilder, FactoryRegistry, normalize_extension
from .types import ErrorKind, LoadRequest, MeshSize, Preset, PresetFactoryError

SCHEME_SEPARATOR = "://"
IDLE_SCHEME = "idle"
FILE_SCHEME = "file"


def parse_scheme(target: str) -> tuple[str | None, str]:
    """Split ``target`` into (scheme, rest). Scheme is None for a bare path."""
    scheme, sep, rest = target.partition(SCHEME_SEPARATOR)
    if not sep:
        return None, target
    return scheme.lower(), rest


def parse_extension(path: str) -> str | None:
    """Normalized text after the last '.' of the final path component, or None."""
    filename = PurePath(path).name
    start = filename.rfind(".")
    if start == -1 or start == len(filename) - 1:
        return None
    return normalize_extension(filename[start + 1:])


def resolve_request(target: str) -> LoadRequest:
    """Turn a create_preset_from_file argument into a LoadRequest."""
    scheme, rest = parse_scheme(target)

    if scheme == IDLE_SCHEME:
        return LoadRequest(scheme=IDLE_SCHEME, target=target)

    if scheme is not None and scheme != FILE_SCHEME:
        raise PresetFactoryError(
            f"Unsupported URL scheme '{scheme}' in '{target}'",
            kind=ErrorKind.UNSUPPORTED_SCHEME,
            scheme=scheme,
            path=target,
        )

    extension = parse_extension(rest)
    if extension is None:
        raise PresetFactoryError(
            f"Cannot determine preset type: '{target}' has no file extension",
            kind=ErrorKind.MISSING_EXTENSION,
            path=rest,
        )
    return LoadRequest(scheme=FILE_SCHEME, target=target, path=rest, extension=extension)


class PresetFactoryManager:
    """Loads presets through a privately owned FactoryRegistry."""

    def __init__(self, builtins: Sequence[FactoryBuilder] | None = None) -> None:
        self.registry = FactoryRegistry(builtins)

    def __enter__(self) -> PresetFactoryManager:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # -- registry forwarding --

    @property
    def mesh(self) -> MeshSize | None:
        return self.registry.mesh

    def initialize(self, width: int, height: int) -> None:
        self.registry.initialize(width, height)

    def factory(self, extension: str) -> PresetFactory:
        return self.registry.factory(extension)

    def extension_handled(self, extension: str) -> bool:
        return self.registry.extension_handled(extension)

    def extensions_handled(self) -> list[str]:
        return self.registry.extensions_handled()

    def close(self) -> None:
        self.registry.close()

    # -- loading --

    def create_preset_from_file(self, filename: str) -> Preset:
        """Load a preset from a path, ``file://`` URL or ``idle://`` URL."""
        self.registry.require_initialized()
        request = resolve_request(filename)

        if request.scheme == IDLE_SCHEME:
            return load_idle_preset(self.registry.mesh)

        # Unknown extensions fail before the file is opened.
        self.registry.factory(request.extension)

        try:
            stream = open(request.path, "rb")
        except (OSError, ValueError) as e:
            raise PresetFactoryError(
                f"Could not open preset file {request.path!r}: {getattr(e, 'strerror', None) or e}",
                kind=ErrorKind.STREAM_OPEN_FAILURE,
                extension=request.extension,
                path=request.path,
            ) from e

        with stream:
            return self.create_preset_from_stream(request.extension, stream)

    def create_preset_from_stream(self, extension: str, stream: BinaryIO) -> Preset:
        """Load a preset of type ``extension`` from ``stream``.

        The caller keeps ownership of ``stream``; it is neither closed nor rewound.
        """
        factory = self.registry.factory(extension)
        tag = normalize_extension(extension)
        try:
            return factory.load_preset_from_stream(stream)
        except Exception as e:
            raise PresetFactoryError(
                f"{tag}: {e}",
                kind=ErrorKind.PRESET_PARSE_FAILURE,
                extension=tag,
            ) from e
