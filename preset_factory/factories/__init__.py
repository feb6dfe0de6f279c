from .base import PresetFactory
from .idle import load_idle_preset
from .milkdrop import MilkdropPresetFactory, parse_milk

__all__ = ["MilkdropPresetFactory", "PresetFactory", "load_idle_preset", "parse_milk"]
