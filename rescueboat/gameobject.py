"""Transformable scene objects with an optional box collider."""

from __future__ import annotations

from typing import Optional, Sequence, Union

import numpy as np

from rescueboat.collider import Collider
from rescueboat.math3d import (
    matrix_from_srt,
    normalize,
    quaternion_from_euler_degrees,
    quaternion_multiply,
    rotate_vector,
)

ArrayLike = Union[Sequence[float], np.ndarray]


def _as3(value: ArrayLike) -> np.ndarray:
    return np.asarray(value, dtype=float)[:3].copy()


class GameObject:
    """An object with position, rotation and scale in the world."""

    def __init__(self, name: str = "GameObject") -> None:
        self._world = np.zeros((4, 4))
        self._world_inv_trans = np.zeros((4, 4))
        self._position = np.zeros(3)
        self._collider: Optional[Collider] = None
        self._rotation = np.array([0.0, 0.0, 0.0, 1.0])
        self._forward = np.array([0.0, 0.0, 1.0])
        self._right = np.array([1.0, 0.0, 0.0])
        self._up = np.array([0.0, 1.0, 0.0])
        self.set_rotation_euler(0.0, 0.0, 0.0)
        self._scale = np.ones(3)
        self._world_dirty = False
        self.rebuild_world()
        self.debug = False
        self.enabled = True
        self.name = name

    def update(self, delta_time: float) -> None:
        """Advance the object by one frame; the base object does nothing."""

    # --- world matrices -------------------------------------------------

    def world_matrix(self) -> np.ndarray:
        """Transposed world matrix, rebuilt when stale."""
        if self._world_dirty:
            self.rebuild_world()
        return self._world.copy()

    def world_inv_trans_matrix(self) -> np.ndarray:
        """Inverse transpose of the world matrix, rebuilt when stale."""
        if self._world_dirty:
            self.rebuild_world()
        return self._world_inv_trans.copy()

    def rebuild_world(self) -> None:
        """Rebuild the world matrices from position, rotation and scale."""
        srt = matrix_from_srt(self._scale, self._rotation, self._position)
        self._world = srt.T
        self._world_inv_trans = np.linalg.inv(srt)
        self._world_dirty = False

    # --- position -------------------------------------------------------

    @property
    def position(self) -> np.ndarray:
        """Position in world space."""
        return self._position.copy()

    @position.setter
    def position(self, value: ArrayLike) -> None:
        self._world_dirty = True
        self._position = _as3(value)
        self._sync_collider_position()

    def _sync_collider_position(self) -> None:
        if self._collider is not None:
            self._collider.move_to(self._position)

    def move_absolute(self, amount: ArrayLike) -> None:
        """Move by ``amount`` in world space, ignoring rotation."""
        self._world_dirty = True
        self._position = self._position + _as3(amount)
        self._sync_collider_position()

    def move_relative(self, amount: ArrayLike) -> None:
        """Move by ``amount`` expressed in the object's own rotated frame."""
        self._world_dirty = True
        self._position = self._position + rotate_vector(_as3(amount), self._rotation)
        self._sync_collider_position()

    # --- rotation -------------------------------------------------------

    @property
    def rotation(self) -> np.ndarray:
        """Orientation quaternion ``(x, y, z, w)``."""
        return self._rotation.copy()

    @rotation.setter
    def rotation(self, value: ArrayLike) -> None:
        self._world_dirty = True
        self._rotation = np.asarray(value, dtype=float)[:4].copy()
        self._calculate_axes()
        if self._collider is not None:
            self._collider.rotation = self._rotation

    def set_rotation_euler(self, x: float, y: float, z: float) -> None:
        """Set the orientation from pitch, yaw and roll in degrees."""
        self.rotation = quaternion_from_euler_degrees(x, y, z)

    def rotate(self, x: float, y: float, z: float) -> None:
        """Apply a further rotation given as pitch, yaw and roll in degrees."""
        delta = quaternion_from_euler_degrees(x, y, z)
        self.rotation = quaternion_multiply(self._rotation, delta)

    def _calculate_axes(self) -> None:
        self._forward = normalize(rotate_vector((0.0, 0.0, 1.0), self._rotation))
        self._right = normalize(rotate_vector((1.0, 0.0, 0.0), self._rotation))
        self._up = normalize(rotate_vector((0.0, 1.0, 0.0), self._rotation))

    @property
    def forward_axis(self) -> np.ndarray:
        """Local +Z axis in world space."""
        return self._forward.copy()

    @property
    def right_axis(self) -> np.ndarray:
        """Local +X axis in world space."""
        return self._right.copy()

    @property
    def up_axis(self) -> np.ndarray:
        """Local +Y axis in world space."""
        return self._up.copy()

    # --- scale ----------------------------------------------------------

    @property
    def scale(self) -> np.ndarray:
        """Scale along each axis."""
        return self._scale.copy()

    @scale.setter
    def scale(self, value: ArrayLike) -> None:
        self._world_dirty = True
        self._scale = _as3(value)

    # --- collider -------------------------------------------------------

    @property
    def collider(self) -> Optional[Collider]:
        """The attached collider, if any."""
        return self._collider

    def add_collider(self, size: ArrayLike, offset: Optional[ArrayLike] = None) -> None:
        """Attach a box collider unless one is already present."""
        if self._collider is None:
            self._collider = Collider(
                self._position, size, np.zeros(3) if offset is None else offset
            )