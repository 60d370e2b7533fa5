import numpy as np
import pytest

from rescueboat.focus_camera import FocusCamera
from rescueboat.gameobject import GameObject
from rescueboat.inputs import InputManager
from rescueboat.math3d import length, quaternion_from_euler_degrees


@pytest.fixture
def inputs():
    manager = InputManager()
    manager.update_focus(True)
    return manager


def _camera(inputs, anchor=(0.0, 16.0, -23.0), zoom_distance=4.0, y_min=2.0, focus_at=(0.0, 0.0, 0.0)):
    focus = GameObject("focus")
    focus.position = focus_at
    camera = FocusCamera(focus, anchor, (40.75, 0.0, 0.0), zoom_distance, y_min, inputs)
    return camera, focus


def test_starts_at_anchor_with_anchor_rotation(inputs):
    camera, _ = _camera(inputs)
    assert np.allclose(camera.position, [0.0, 16.0, -23.0])
    assert np.allclose(camera.anchor_rotation, quaternion_from_euler_degrees(40.75, 0.0, 0.0))
    assert camera.zoom == 0.0


def test_set_anchor_rotation_updates_rotation(inputs):
    camera, _ = _camera(inputs)
    camera.set_anchor_rotation((10.0, 20.0, 0.0))
    expected = quaternion_from_euler_degrees(10.0, 20.0, 0.0)
    assert np.allclose(camera.anchor_rotation, expected)
    assert np.allclose(camera.rotation, expected)


def test_no_scroll_keeps_camera_at_anchor(inputs):
    camera, _ = _camera(inputs)
    camera.update(0.016)
    assert camera.zoom == 0.0
    assert np.allclose(camera.position, [0.0, 16.0, -23.0])


def test_scroll_in_is_clamped_to_one(inputs):
    camera, _ = _camera(inputs)
    inputs.on_mouse_wheel(100.0, 0, 0)
    camera.update(0.016)
    assert camera.zoom == 1.0
    assert camera.moving_in


def test_scroll_out_is_clamped_to_zero(inputs):
    camera, _ = _camera(inputs)
    inputs.on_mouse_wheel(-100.0, 0, 0)
    camera.update(0.016)
    assert camera.zoom == 0.0
    assert not camera.moving_in


def test_zoom_in_approaches_focus(inputs):
    camera, focus = _camera(inputs)
    before = length(focus.position - camera.position)
    inputs.on_mouse_wheel(5.0, 0, 0)
    camera.update(0.016)
    inputs.update_states()
    camera.update(0.016)
    after = length(focus.position - camera.position)
    assert after < before


def test_close_enough_camera_holds_position(inputs):
    camera, _ = _camera(inputs, anchor=(0.0, 3.0, -1.0), zoom_distance=4.0, y_min=0.0)
    inputs.on_mouse_wheel(1.0, 0, 0)
    camera.update(0.016)
    assert np.allclose(camera.position, [0.0, 3.0, -1.0])


def test_height_never_below_minimum(inputs):
    camera, _ = _camera(inputs, anchor=(0.0, -5.0, -10.0), y_min=2.0, focus_at=(0.0, 0.0, 5.0))
    camera.update(0.016)
    assert camera.position[1] == pytest.approx(2.0)


def test_rotation_stays_unit_and_view_refreshes(inputs):
    camera, _ = _camera(inputs)
    view_before = camera.view_matrix
    camera.update(0.016)
    assert np.linalg.norm(camera.rotation) == pytest.approx(1.0)
    assert not np.allclose(camera.view_matrix, view_before)