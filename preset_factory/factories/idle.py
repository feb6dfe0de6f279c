"""Built-in idle preset, shown when no real preset is loaded."""

from __future__ import annotations

from ..types import MeshSize, MilkdropPreset
from .milkdrop import parse_milk

IDLE_PRESET_NAME = "idle"

IDLE_PRESET_TEXT = """\
[preset00]
fRating=2.0
fGammaAdj=1.0
fDecay=0.98
fVideoEchoZoom=1.0
fVideoEchoAlpha=0.5
nVideoEchoOrientation=0
nWaveMode=7
bAdditiveWaves=1
bWaveDots=0
bModWaveAlphaByVolume=1
fWaveAlpha=0.8
fWaveScale=1.0
fWarpAnimSpeed=1.0
fWarpScale=1.0
zoom=1.0
rot=0.0
warp=0.0
wave_r=0.5
wave_g=0.5
wave_b=0.5
per_frame_1=wave_r = 0.5 + 0.5*sin(time*1.13);
per_frame_2=wave_g = 0.5 + 0.5*sin(time*1.23);
per_frame_3=wave_b = 0.5 + 0.5*sin(time*1.33);
"""


def load_idle_preset(mesh: MeshSize) -> MilkdropPreset:
    """Build the idle preset for ``mesh``. Never touches the filesystem."""
    return parse_milk(IDLE_PRESET_TEXT, IDLE_PRESET_NAME, mesh, format_name="idle")
