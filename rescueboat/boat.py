"""The player's boat: steers, picks up swimmers and tows them in a trail."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Optional

import numpy as np

from rescueboat.collider import Collider
from rescueboat.entities import Entity, EntityManager, default_manager
from rescueboat.gameobject import GameObject
from rescueboat.inputs import InputManager
from rescueboat.math3d import length, lerp, quaternion_slerp
from rescueboat.swimmer import Swimmer, SwimmerState
from rescueboat.swimmer_manager import SwimmerManager

VK_LEFT = 0x25
VK_UP = 0x26
VK_RIGHT = 0x27
VK_DOWN = 0x28

LEFT_KEYS = (VK_LEFT, VK_UP, "A", "W")
RIGHT_KEYS = (VK_RIGHT, VK_DOWN, "D", "S")

FIRST_SWIMMER_LAG = 0.8
SEEK_ARC_HEIGHT = 3.0
GAME_OVER_MESSAGE = "Game Over! Press the 'Spacebar' to reset."

_IDENTITY_QUATERNION = np.array([0.0, 0.0, 0.0, 1.0])


class BoatState(Enum):
    """Phases of the boat's life in a round."""

    STARTING = "starting"
    PLAYING = "playing"
    CRASHED = "crashed"
    RESETTING = "resetting"


class Boat(Entity):
    """The player-controlled boat."""

    def __init__(
        self,
        mesh: Any,
        material: Any,
        level_radius: float,
        swimmers: Optional[SwimmerManager] = None,
        inputs: Optional[InputManager] = None,
        manager: Optional[EntityManager] = None,
    ) -> None:
        manager = manager if manager is not None else default_manager()
        super().__init__(mesh, material, "player", manager)
        self.speed = 3.0
        self.turn_speed = 150.0
        self.min_distance = 0.5
        self.level_radius = level_radius
        self._state = BoatState.STARTING
        self._swimmers = (
            swimmers if swimmers is not None else SwimmerManager(manager, level_radius - 1)
        )
        self._inputs = inputs if inputs is not None else InputManager()
        self._trail: list[Swimmer] = []
        self._seek_timer = 0.0
        self._seek_pos = np.zeros(3)

    @property
    def state(self) -> BoatState:
        """The boat's current phase."""
        return self._state

    @property
    def trail(self) -> tuple[Swimmer, ...]:
        """Swimmers being towed, nearest first."""
        return tuple(self._trail)

    def update(self, delta_time: float) -> None:
        """Run the behaviour for the current phase."""
        if self._state is BoatState.STARTING:
            self.input_start()
        elif self._state is BoatState.PLAYING:
            self.handle_input(delta_time)
            self.move(delta_time)
            self.check_collisions()
        elif self._state is BoatState.RESETTING:
            self.seek_origin(delta_time)

    def _any_pressed(self, keys) -> bool:
        return any(self._inputs.get_key(key) for key in keys)

    def input_start(self) -> None:
        """Start playing once any steering key is pressed."""
        if self._any_pressed(LEFT_KEYS) or self._any_pressed(RIGHT_KEYS):
            self._state = BoatState.PLAYING

    def handle_input(self, delta_time: float) -> None:
        """Turn left or right from the steering keys."""
        if self._any_pressed(LEFT_KEYS):
            self.rotate(0.0, -self.turn_speed * delta_time, 0.0)
        elif self._any_pressed(RIGHT_KEYS):
            self.rotate(0.0, self.turn_speed * delta_time, 0.0)

    def reset(self) -> None:
        """Drop the trail and glide back to the origin."""
        self.clear_swimmers()
        self._state = BoatState.RESETTING
        self._seek_timer = 0.0
        self._seek_pos = self.position

    def move(self, delta_time: float) -> None:
        """Move forward along the boat's heading."""
        self.move_relative((0.0, 0.0, self.speed * delta_time))

    def seek_origin(self, delta_time: float) -> None:
        """Arc back to the origin over one second, straightening out on the way."""
        self._seek_timer += delta_time
        if self._seek_timer >= 1:
            self._state = BoatState.STARTING
            self.position = (0.0, 0.0, 0.0)
            return

        t = self._seek_timer
        movement = lerp(self._seek_pos, np.zeros(3), t)
        movement[1] = math.sin(t * math.pi) * SEEK_ARC_HEIGHT
        self.position = movement
        self.rotation = quaternion_slerp(self.rotation, _IDENTITY_QUATERNION, t)

    def _own_collider(self) -> Collider:
        if self.collider is None:
            raise RuntimeError("the boat needs a collider to check collisions")
        return self.collider

    def check_collisions(self) -> None:
        """Crash outside the level or into the trail; pick up floating swimmers."""
        if length(self.position) > self.level_radius:
            self.game_over()
            return

        collider = self._own_collider()
        for swimmer in self._trail[1:]:
            if (
                swimmer.state is SwimmerState.FOLLOWING
                and swimmer.collider is not None
                and collider.collides(swimmer.collider)
            ):
                self.game_over()
                return

        for index in reversed(range(len(self._swimmers))):
            swimmer = self._swimmers.get_swimmer(index)
            if (
                swimmer is not None
                and swimmer.state is SwimmerState.FLOATING
                and swimmer.collider is not None
                and collider.collides(swimmer.collider)
            ):
                self._attach_swimmer(swimmer, index)

    def game_over(self) -> None:
        """Stop the boat and freeze the trail, starting the hit ripple."""
        for swimmer in self._trail[1:]:
            swimmer.state = SwimmerState.STILL
        print(GAME_OVER_MESSAGE)
        self._state = BoatState.CRASHED
        if self._trail:
            self._trail[0].state = SwimmerState.HITTING

    def clear_swimmers(self) -> None:
        """Send every towed swimmer away."""
        for swimmer in self._trail:
            swimmer.state = SwimmerState.LEAVING
        self._trail.clear()

    def _attach_swimmer(self, swimmer: Swimmer, index: int) -> None:
        leader: GameObject = self._trail[-1] if self._trail else self
        if not self._trail:
            swimmer.lag_seconds = FIRST_SWIMMER_LAG
        self._trail.append(swimmer)
        self._swimmers.attach_swimmer(swimmer, leader, index)