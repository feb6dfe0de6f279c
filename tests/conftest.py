"""Shared fixtures for preset-factory tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from preset_factory.factories.base import PresetFactory
from preset_factory.manager import PresetFactoryManager
from preset_factory.types import ErrorKind, MeshSize, Preset, PresetFactoryError, PresetParseError

SAMPLE_MILK = """\
[preset00]
fRating=3.0
zoom=1.01
rot=0.02
// per-frame equations
per_frame_1=wave_r = 0.5;
"""


class RecordingFactory(PresetFactory):
    """Test factory that counts closes and reads the whole stream."""

    instances: list["RecordingFactory"] = []

    def __init__(self, mesh: MeshSize, extensions: tuple[str, ...] = ("rec", "REC2")) -> None:
        super().__init__(mesh)
        self._extensions = extensions
        self.close_count = 0
        RecordingFactory.instances.append(self)

    @property
    def extensions(self) -> tuple[str, ...]:
        return self._extensions

    def load_preset_from_stream(self, stream) -> Preset:
        data = stream.read()
        if data.startswith(b"bad"):
            raise PresetParseError("content rejected")
        if data.startswith(b"typed"):
            raise PresetFactoryError("bad header", kind=ErrorKind.UNKNOWN_EXTENSION)
        return Preset(name="recorded", format="rec", mesh=self.mesh)

    def close(self) -> None:
        super().close()
        self.close_count += 1


@pytest.fixture
def recording_factories():
    RecordingFactory.instances = []
    yield RecordingFactory.instances
    RecordingFactory.instances = []


@pytest.fixture
def manager() -> PresetFactoryManager:
    m = PresetFactoryManager()
    m.initialize(32, 24)
    yield m
    m.close()


@pytest.fixture
def presets_dir(tmp_path) -> Path:
    (tmp_path / "Waves.milk").write_text(SAMPLE_MILK)
    (tmp_path / "Upper.MILK").write_text(SAMPLE_MILK)
    (tmp_path / "alias.prjm").write_text(SAMPLE_MILK)
    (tmp_path / "broken.milk").write_text("[preset00]\nthis line has no equals sign\n")
    (tmp_path / "noext").write_text(SAMPLE_MILK)
    (tmp_path / "notes.txt").write_text("not a preset")
    return tmp_path
