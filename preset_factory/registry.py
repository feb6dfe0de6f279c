"""FactoryRegistry: extension tag -> preset factory mapping, keyed by mesh size."""

from __future__ import annotations

from typing import Callable, Sequence

from .factories.base import PresetFactory
from .factories.milkdrop import MilkdropPresetFactory
from .types import ErrorKind, MeshSize, PresetFactoryError

FactoryBuilder = Callable[[MeshSize], PresetFactory]

BUILTIN_FACTORIES: tuple[FactoryBuilder, ...] = (MilkdropPresetFactory,)


def normalize_extension(extension: str) -> str:
    """Lowercase and drop a leading '.' (".MILK" -> "milk")."""
    return extension.strip().lstrip(".").lower()


class FactoryRegistry:
    """Owns every preset factory and the extension map pointing into them.

    Factories live in a single arena (``_factories``); the extension map holds
    indices into it, so an instance registered under several tags is still
    released once.
    """

    def __init__(self, builtins: Sequence[FactoryBuilder] | None = None) -> None:
        self._builtins = tuple(BUILTIN_FACTORIES if builtins is None else builtins)
        self._mesh: MeshSize | None = None
        self._factories: list[PresetFactory] = []
        self._extension_map: dict[str, int] = {}

    @property
    def initialized(self) -> bool:
        return self._mesh is not None

    @property
    def mesh(self) -> MeshSize | None:
        return self._mesh

    def initialize(self, width: int, height: int) -> None:
        """Build the builtin factories for a mesh size.

        Calling again with the same size is a no-op; a new size closes and
        rebuilds every factory.
        """
        if width <= 0 or height <= 0:
            raise PresetFactoryError(
                f"Invalid mesh size {width}x{height}: both dimensions must be positive",
                kind=ErrorKind.INVALID_MESH,
            )

        mesh = MeshSize(width, height)
        if mesh == self._mesh:
            return

        self._release()
        for build in self._builtins:
            factory = build(mesh)
            for extension in factory.extensions:
                self._register_factory(extension, factory)
        self._mesh = mesh

    def _register_factory(self, extension: str, factory: PresetFactory) -> None:
        index = next((i for i, f in enumerate(self._factories) if f is factory), None)
        if index is None:
            self._factories.append(factory)
            index = len(self._factories) - 1
        self._extension_map[normalize_extension(extension)] = index

    def require_initialized(self) -> None:
        if self._mesh is None:
            raise PresetFactoryError(
                "Preset factory registry is not initialized; call initialize() first",
                kind=ErrorKind.NOT_INITIALIZED,
            )

    def factory(self, extension: str) -> PresetFactory:
        """Return the factory registered for ``extension``."""
        self.require_initialized()
        tag = normalize_extension(extension)
        index = self._extension_map.get(tag)
        if index is None:
            raise PresetFactoryError(
                f"No preset factory registered for extension '{tag}'",
                kind=ErrorKind.UNKNOWN_EXTENSION,
                extension=tag,
            )
        return self._factories[index]

    def extension_handled(self, extension: str) -> bool:
        if self._mesh is None:
            return False
        return normalize_extension(extension) in self._extension_map

    def extensions_handled(self) -> list[str]:
        """All registered tags in registration order, aliases included."""
        self.require_initialized()
        return list(self._extension_map)

    def factories(self) -> list[PresetFactory]:
        """Unique factory instances in registration order."""
        self.require_initialized()
        return list(self._factories)

    def _release(self) -> None:
        factories, self._factories = self._factories, []
        self._extension_map = {}
        self._mesh = None
        for factory in factories:
            factory.close()

    def close(self) -> None:
        """Release every owned factory once and return to the uninitialized state."""
        self._release()
