"""Oriented bounding boxes with separating-axis collision tests."""

from __future__ import annotations

from itertools import product
from typing import Optional, Sequence, Union

import numpy as np

from rescueboat.math3d import matrix_from_srt, transform4

ArrayLike = Union[Sequence[float], np.ndarray]

_EPSILON = float(np.finfo(np.float32).eps)

_UNIT_AXES = (
    np.array([1.0, 0.0, 0.0, 0.0]),
    np.array([0.0, 1.0, 0.0, 0.0]),
    np.array([0.0, 0.0, 1.0, 0.0]),
)


class Collider:
    """A box collider centred on its owner's position plus an offset."""

    def __init__(
        self,
        position: ArrayLike,
        size: Optional[ArrayLike] = None,
        offset: Optional[ArrayLike] = None,
    ) -> None:
        self._offset = np.zeros(3) if offset is None else np.asarray(offset, dtype=float)[:3].copy()
        self._size = np.zeros(3) if size is None else np.asarray(size, dtype=float)[:3].copy()
        self._position = np.asarray(position, dtype=float)[:3] + self._offset
        self._rotation = np.zeros(4)
        self._world = np.zeros((4, 4))
        self._world_dirty = True

    @property
    def position(self) -> np.ndarray:
        """Centre of the box."""
        return self._position.copy()

    @property
    def offset(self) -> np.ndarray:
        """Offset of the centre from the owner's position."""
        return self._offset.copy()

    @property
    def size(self) -> np.ndarray:
        """Width, height and length of the box."""
        return self._size.copy()

    @size.setter
    def size(self, value: ArrayLike) -> None:
        self._size = np.asarray(value, dtype=float)[:3].copy()
        self._world_dirty = True

    @property
    def rotation(self) -> np.ndarray:
        """Orientation quaternion ``(x, y, z, w)``."""
        return self._rotation.copy()

    @rotation.setter
    def rotation(self, value: ArrayLike) -> None:
        self._rotation = np.asarray(value, dtype=float)[:4].copy()
        self._world_dirty = True

    def _construct_world_matrix(self) -> None:
        self._world = matrix_from_srt(self._size, self._rotation, self._position).T
        self._world_dirty = False

    def world_matrix(self) -> np.ndarray:
        """Transposed world matrix of the box, rebuilt when stale."""
        if self._world_dirty:
            self._construct_world_matrix()
        return self._world.copy()

    def half_size(self) -> np.ndarray:
        """Half of each dimension of the box."""
        return self._size / 2

    def normal(self, axis: ArrayLike) -> np.ndarray:
        """Transform a local axis by the box's world matrix."""
        return transform4(axis, self.world_matrix())

    def center_global(self) -> np.ndarray:
        """Transform the centre by the most recently built world matrix."""
        return transform4(self._position, self._world)

    def move_to(self, position: ArrayLike) -> None:
        """Place the box at ``position`` plus its offset."""
        self._position = np.asarray(position, dtype=float)[:3] + self._offset
        self._world_dirty = True

    def collides(self, other: "Collider") -> bool:
        """Whether this box overlaps ``other``."""
        return self.sat(other)

    def sat(self, other: "Collider") -> bool:
        """Separating-axis test over the 15 candidate axes of two boxes."""
        axes_a = [self.normal(axis)[:3] for axis in _UNIT_AXES]
        axes_b = [other.normal(axis)[:3] for axis in _UNIT_AXES]

        rot = np.array([[np.dot(a, b) for b in axes_b] for a in axes_a])
        offset = other._position - self._position
        t = np.array([np.dot(offset, a) for a in axes_a])
        sub = np.abs(rot) + _EPSILON

        half_a = self.half_size()
        half_b = other.half_size()

        for i in range(3):
            if abs(t[i]) > half_a[i] + np.dot(half_b, sub[i, :]):
                return False

        for j in range(3):
            if abs(np.dot(t, rot[:, j])) > np.dot(half_a, sub[:, j]) + half_b[j]:
                return False

        for i, j in product(range(3), repeat=2):
            i1, i2 = (i + 1) % 3, (i + 2) % 3
            j1, j2 = (j + 1) % 3, (j + 2) % 3
            ra = half_a[i1] * sub[i2, j] + half_a[i2] * sub[i1, j]
            rb = half_b[j1] * sub[i, j2] + half_b[j2] * sub[i, j1]
            if abs(t[i2] * rot[i1, j] - t[i1] * rot[i2, j]) > ra + rb:
                return False

        return True