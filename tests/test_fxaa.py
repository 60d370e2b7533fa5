import pytest

from rescueboat.fxaa import BooleanFlag, FXAASettings, LuminanceFlag, PresetFlag


def test_defaults_match_preset_zero():
    defaults = FXAASettings()
    loaded = FXAASettings()
    loaded.load_preset(PresetFlag.PRESET_2)
    loaded.load_preset(0)
    assert loaded == defaults


def test_default_values_pinned():
    settings = FXAASettings()
    assert settings.edge_threshold == pytest.approx(1.0 / 4.0)
    assert settings.edge_threshold_min == pytest.approx(1.0 / 12.0)
    assert settings.search_steps == 2
    assert settings.search_acceleration == 4
    assert settings.subpix_faster is BooleanFlag.ON
    assert settings.subpix_cap == pytest.approx(2.0 / 3.0)
    assert settings.luminance_method is LuminanceFlag.REVISED
    assert settings.debug_grayscale_channel == 1


def test_default_alias_is_preset_zero():
    settings = FXAASettings()
    settings.load_preset(PresetFlag.PRESET_3)
    settings.load_preset(PresetFlag.DEFAULT)
    assert settings.preset is PresetFlag.PRESET_0
    assert settings.search_steps == 2
    settings.load_preset(PresetFlag.CUSTOM)
    assert settings.preset == 6


@pytest.mark.parametrize(
    "preset, steps, acceleration",
    [(1, 4, 3), (2, 8, 2), (3, 16, 1), (4, 24, 1), (5, 32, 1)],
)
def test_preset_search_values(preset, steps, acceleration):
    settings = FXAASettings()
    settings.load_preset(preset)
    assert settings.preset == preset
    assert settings.search_steps == steps
    assert settings.search_acceleration == acceleration
    assert settings.subpix_faster is BooleanFlag.OFF
    assert settings.subpix is BooleanFlag.ON
    assert settings.subpix_cap == pytest.approx(3.0 / 4.0)
    assert settings.search_threshold == pytest.approx(1.0 / 4.0)


def test_preset_one_edge_minimum():
    settings = FXAASettings()
    settings.load_preset(PresetFlag.PRESET_1)
    assert settings.edge_threshold == pytest.approx(1.0 / 8.0)
    assert settings.edge_threshold_min == pytest.approx(1.0 / 16.0)


def test_high_presets_share_edge_minimum():
    minimums = set()
    for preset in (PresetFlag.PRESET_2, PresetFlag.PRESET_3, PresetFlag.PRESET_4, PresetFlag.PRESET_5):
        settings = FXAASettings()
        settings.load_preset(preset)
        minimums.add(settings.edge_threshold_min)
    assert minimums == {pytest.approx(1.0 / 24.0)}


def test_custom_preset_keeps_values():
    settings = FXAASettings()
    settings.load_preset(PresetFlag.PRESET_4)
    settings.search_steps = 99
    settings.edge_threshold = 0.5
    settings.load_preset(PresetFlag.CUSTOM)
    assert settings.preset is PresetFlag.CUSTOM
    assert settings.search_steps == 99
    assert settings.edge_threshold == 0.5


def test_preset_does_not_touch_debug_settings():
    settings = FXAASettings()
    settings.debug_highlight = BooleanFlag.ON
    settings.luminance_method = LuminanceFlag.GREEN
    settings.load_preset(PresetFlag.PRESET_3)
    assert settings.debug_highlight is BooleanFlag.ON
    assert settings.luminance_method is LuminanceFlag.GREEN


def test_reset_restores_defaults():
    settings = FXAASettings()
    settings.load_preset(PresetFlag.PRESET_5)
    settings.fxaa = BooleanFlag.OFF
    settings.luminance_method = LuminanceFlag.BLUE_GAMMA
    settings.debug_pair = BooleanFlag.ON
    settings.debug_grayscale = 0.75
    settings.debug_grayscale_channel = 3
    settings.reset()
    assert settings == FXAASettings()


def test_unknown_preset_rejected():
    settings = FXAASettings()
    with pytest.raises(ValueError):
        settings.load_preset(7)
    assert settings.preset is PresetFlag.DEFAULT