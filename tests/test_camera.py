import math

import numpy as np
import pytest

from rescueboat.camera import Camera
from rescueboat.math3d import perspective_fov_lh


def test_default_view_is_identity():
    cam = Camera()
    assert np.allclose(cam.view_matrix, np.identity(4))


def test_view_translation_after_update():
    cam = Camera()
    cam.position = (1.0, 2.0, 3.0)
    cam.update(0.1)
    assert np.allclose(cam.view_matrix[:3, 3], [-1.0, -2.0, -3.0])


def test_view_maps_position_to_origin():
    cam = Camera()
    cam.position = (2.0, -1.0, 5.0)
    cam.set_rotation_euler(30, 40, 0)
    cam.create_view_matrix()
    point = np.append(cam.position, 1.0)
    assert np.allclose(cam.view_matrix @ point, [0, 0, 0, 1], atol=1e-9)


def test_view_maps_forward_to_plus_z():
    cam = Camera()
    cam.set_rotation_euler(20, -60, 0)
    cam.create_view_matrix()
    ahead = np.append(cam.position + cam.forward_axis, 1.0)
    assert np.allclose(cam.view_matrix @ ahead, [0, 0, 1, 1], atol=1e-9)


def test_projection_matches_transposed_perspective():
    cam = Camera()
    cam.create_projection_matrix(0.25 * math.pi, 16 / 9, 0.1, 100.0)
    expected = perspective_fov_lh(0.25 * math.pi, 16 / 9, 0.1, 100.0).T
    assert np.allclose(cam.projection_matrix, expected)


def test_projection_depth_range():
    cam = Camera()
    cam.create_projection_matrix(0.25 * math.pi, 1.5, 0.1, 100.0)
    proj = cam.projection_matrix
    near = proj @ np.array([0.0, 0.0, 0.1, 1.0])
    far = proj @ np.array([0.0, 0.0, 100.0, 1.0])
    assert np.isclose(near[2] / near[3], 0.0)
    assert np.isclose(far[2] / far[3], 1.0)


def test_projection_rejects_bad_clip():
    cam = Camera()
    with pytest.raises(ValueError):
        cam.create_projection_matrix(1.0, 1.0, 5.0, 5.0)


def test_projection_rejects_zero_fov():
    cam = Camera()
    with pytest.raises(ValueError):
        cam.create_projection_matrix(0.0, 1.0, 0.1, 100.0)