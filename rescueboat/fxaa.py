"""Settings for the FXAA anti-aliasing post-process and its standard presets."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import IntEnum
from typing import Union


class BooleanFlag(IntEnum):
    """An on/off switch as the shader expects it."""

    OFF = 0
    ON = 1


class PresetFlag(IntEnum):
    """Quality presets; ``CUSTOM`` keeps whatever values are set."""

    PRESET_0 = 0
    DEFAULT = 0
    PRESET_1 = 1
    PRESET_2 = 2
    PRESET_3 = 3
    PRESET_4 = 4
    PRESET_5 = 5
    CUSTOM = 6


class LuminanceFlag(IntEnum):
    """How luma is computed from a colour."""

    RGBL = 0
    ORIGINAL = 1
    REVISED = 2
    LINEAR = 3
    RED = 4
    RED_GAMMA = 5
    GREEN = 6
    GREEN_GAMMA = 7
    BLUE = 8
    BLUE_GAMMA = 9


@dataclass(frozen=True)
class _PresetValues:
    edge_threshold: float
    edge_threshold_min: float
    search_steps: int
    search_acceleration: int
    search_threshold: float
    subpix: BooleanFlag
    subpix_faster: BooleanFlag
    subpix_cap: float
    subpix_trim: float


def _high_quality(search_steps: int) -> _PresetValues:
    return _PresetValues(
        edge_threshold=1.0 / 8.0,
        edge_threshold_min=1.0 / 24.0,
        search_steps=search_steps,
        search_acceleration=1,
        search_threshold=1.0 / 4.0,
        subpix=BooleanFlag.ON,
        subpix_faster=BooleanFlag.OFF,
        subpix_cap=3.0 / 4.0,
        subpix_trim=1.0 / 4.0,
    )


_PRESETS: dict[PresetFlag, _PresetValues] = {
    PresetFlag.PRESET_0: _PresetValues(
        edge_threshold=1.0 / 4.0,
        edge_threshold_min=1.0 / 12.0,
        search_steps=2,
        search_acceleration=4,
        search_threshold=1.0 / 4.0,
        subpix=BooleanFlag.ON,
        subpix_faster=BooleanFlag.ON,
        subpix_cap=2.0 / 3.0,
        subpix_trim=1.0 / 4.0,
    ),
    PresetFlag.PRESET_1: _PresetValues(
        edge_threshold=1.0 / 8.0,
        edge_threshold_min=1.0 / 16.0,
        search_steps=4,
        search_acceleration=3,
        search_threshold=1.0 / 4.0,
        subpix=BooleanFlag.ON,
        subpix_faster=BooleanFlag.OFF,
        subpix_cap=3.0 / 4.0,
        subpix_trim=1.0 / 4.0,
    ),
    PresetFlag.PRESET_2: _PresetValues(
        edge_threshold=1.0 / 8.0,
        edge_threshold_min=1.0 / 24.0,
        search_steps=8,
        search_acceleration=2,
        search_threshold=1.0 / 4.0,
        subpix=BooleanFlag.ON,
        subpix_faster=BooleanFlag.OFF,
        subpix_cap=3.0 / 4.0,
        subpix_trim=1.0 / 4.0,
    ),
    PresetFlag.PRESET_3: _high_quality(16),
    PresetFlag.PRESET_4: _high_quality(24),
    PresetFlag.PRESET_5: _high_quality(32),
}

_DEFAULTS = _PRESETS[PresetFlag.DEFAULT]


@dataclass
class FXAASettings:
    """Preferences for the FXAA pass; defaults match preset 0."""

    fxaa: BooleanFlag = BooleanFlag.ON
    preset: PresetFlag = PresetFlag.DEFAULT
    edge_threshold: float = _DEFAULTS.edge_threshold
    edge_threshold_min: float = _DEFAULTS.edge_threshold_min
    search_steps: int = _DEFAULTS.search_steps
    search_acceleration: int = _DEFAULTS.search_acceleration
    search_threshold: float = _DEFAULTS.search_threshold
    subpix: BooleanFlag = _DEFAULTS.subpix
    subpix_faster: BooleanFlag = _DEFAULTS.subpix_faster
    subpix_cap: float = _DEFAULTS.subpix_cap
    subpix_trim: float = _DEFAULTS.subpix_trim
    luminance_method: LuminanceFlag = LuminanceFlag.REVISED
    debug_discard: BooleanFlag = BooleanFlag.OFF
    debug_passthrough: BooleanFlag = BooleanFlag.OFF
    debug_horzvert: BooleanFlag = BooleanFlag.OFF
    debug_pair: BooleanFlag = BooleanFlag.OFF
    debug_negpos: BooleanFlag = BooleanFlag.OFF
    debug_offset: BooleanFlag = BooleanFlag.OFF
    debug_highlight: BooleanFlag = BooleanFlag.OFF
    debug_grayscale: float = 0.0
    debug_grayscale_channel: int = 1

    def load_preset(self, preset_id: Union[int, PresetFlag]) -> None:
        """Overwrite the tuning values from a preset; ``CUSTOM`` changes nothing else.

        Raises ValueError for an id that names no preset.
        """
        preset = PresetFlag(preset_id)
        self.preset = preset
        values = _PRESETS.get(preset)
        if values is None:
            return
        for field in fields(values):
            setattr(self, field.name, getattr(values, field.name))

    def reset(self) -> None:
        """Return every setting to its default."""
        self.load_preset(PresetFlag.DEFAULT)
        self.fxaa = BooleanFlag.ON
        self.luminance_method = LuminanceFlag.REVISED
        self.debug_discard = BooleanFlag.OFF
        self.debug_passthrough = BooleanFlag.OFF
        self.debug_horzvert = BooleanFlag.OFF
        self.debug_pair = BooleanFlag.OFF
        self.debug_negpos = BooleanFlag.OFF
        self.debug_offset = BooleanFlag.OFF
        self.debug_highlight = BooleanFlag.OFF
        self.debug_grayscale = 0.0
        self.debug_grayscale_channel = 1