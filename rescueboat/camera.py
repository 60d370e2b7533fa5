"""A camera object holding view and projection matrices."""

from __future__ import annotations

import numpy as np

from rescueboat.gameobject import GameObject
from rescueboat.math3d import cross, look_to_lh, perspective_fov_lh


class Camera(GameObject):
    """A game object that sees the scene; matrices are stored transposed."""

    def __init__(self) -> None:
        super().__init__()
        self._world_up = np.array([0.0, 1.0, 0.0])
        self._view = np.identity(4)
        self._projection = np.identity(4)
        self.create_view_matrix()

    def update(self, delta_time: float) -> None:
        """Refresh the view matrix for this frame."""
        self.create_view_matrix()

    def create_view_matrix(self) -> None:
        """Build the view matrix from the camera's position and forward axis."""
        forward = self.forward_axis
        up = cross(cross(forward, self._world_up), forward)
        self._view = look_to_lh(self.position, forward, up).T

    def create_projection_matrix(
        self, fov: float, aspect_ratio: float, near_clip: float, far_clip: float
    ) -> None:
        """Build a perspective projection matrix."""
        self._projection = perspective_fov_lh(fov, aspect_ratio, near_clip, far_clip).T

    @property
    def view_matrix(self) -> np.ndarray:
        """Transposed view matrix."""
        return self._view.copy()

    @property
    def projection_matrix(self) -> np.ndarray:
        """Transposed projection matrix."""
        return self._projection.copy()