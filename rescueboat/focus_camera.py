"""A camera that hovers at an anchor and zooms toward a focus object."""

from __future__ import annotations

from typing import Optional, Sequence, Union

import numpy as np

from rescueboat.camera import Camera
from rescueboat.gameobject import GameObject
from rescueboat.inputs import InputManager
from rescueboat.math3d import length, lerp, look_at_lh, matrix_to_quaternion

ArrayLike = Union[Sequence[float], np.ndarray]

ZOOM_TICK = 0.1
FOLLOW_RATE = 0.005


class FocusCamera(Camera):
    """Looks at a focus object; the scroll wheel zooms from the anchor toward it."""

    def __init__(
        self,
        focus: GameObject,
        anchor: ArrayLike,
        anchor_rotation: ArrayLike,
        zoom_distance: float,
        y_minimum: float,
        inputs: Optional[InputManager] = None,
    ) -> None:
        super().__init__()
        self.inputs = inputs if inputs is not None else InputManager()
        self.focus = focus
        self.anchor = np.asarray(anchor, dtype=float)[:3].copy()
        self.max_zoom = zoom_distance
        self.zoom_tick = ZOOM_TICK
        self.y_min = y_minimum
        self._zoom = 0.0
        self._move_in = False
        self.anchor_rotation = np.array([0.0, 0.0, 0.0, 1.0])

        self.position = self.anchor
        self.set_anchor_rotation(anchor_rotation)

    @property
    def zoom(self) -> float:
        """How far toward the focus the camera aims, from 0 to 1."""
        return self._zoom

    @property
    def moving_in(self) -> bool:
        """Whether the last scroll was toward the focus."""
        return self._move_in

    def set_anchor_rotation(self, rotation: ArrayLike) -> None:
        """Set the camera's rotation from degrees and keep it as the anchor's."""
        x, y, z = (float(angle) for angle in rotation[:3])
        self.set_rotation_euler(x, y, z)
        self.anchor_rotation = self.rotation

    def update(self, delta_time: float) -> None:
        """Apply zoom input, ease toward the target and face the focus."""
        scroll = self.inputs.scroll_wheel_delta
        self._zoom += scroll * self.zoom_tick
        if scroll > 0:
            self._move_in = True
        elif scroll < 0:
            self._move_in = False
        self._zoom = min(max(self._zoom, 0.0), 1.0)

        focus_position = self.focus.position
        target = lerp(self.anchor, focus_position, self._zoom)
        new_position = lerp(self.position, target, FOLLOW_RATE)

        distance = length(focus_position - new_position)
        position = self.position if self._move_in and distance <= self.max_zoom else new_position
        if position[1] < self.y_min:
            position[1] = self.y_min
        self.position = position

        view = look_at_lh(self.position, focus_position, self.up_axis)
        self.rotation = matrix_to_quaternion(view)

        super().update(delta_time)