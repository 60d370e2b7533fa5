"""Swimmers: bob in the water, join the boat's trail and follow it."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Callable, Optional

import numpy as np

from rescueboat.entities import Entity, EntityManager, default_manager
from rescueboat.gameobject import GameObject
from rescueboat.math3d import length, lerp, normalize, quaternion_slerp

# Buoyancy constants
MASS = 0.5
GRAVITY = 9.81
FLUID_DENSITY = 2.0
DRAG_COEFF = 1.05
AIR_DENSITY = 0.1225
SURFACE_Y = 0.0

MAX_FPS = 60
DEFAULT_LAG_SECONDS = 0.5

_HIT_DURATION = math.pi / 8
_SURFACE_SEEK_RATE = 0.2
_SURFACE_SNAP = 0.01


class SwimmerState(Enum):
    """What a swimmer is currently doing."""

    ENTERING = "entering"
    FLOATING = "floating"
    JOINING = "joining"
    FOLLOWING = "following"
    STILL = "still"
    HITTING = "hitting"
    NOTHING = "nothing"
    LEAVING = "leaving"


def _seek(value: float, target: float, rate: float) -> float:
    """Move ``value`` part of the way to ``target``, snapping when close."""
    result = value + (target - value) * rate
    if abs(result - target) < _SURFACE_SNAP:
        return target
    return result


class Swimmer(Entity):
    """A person in the water who can be picked up and trail behind a leader."""

    def __init__(
        self,
        mesh: Any,
        material: Any,
        name: str = "swimmer",
        manager: Optional[EntityManager] = None,
    ) -> None:
        self._manager = manager if manager is not None else default_manager()
        super().__init__(mesh, material, name, self._manager)

        self.lag_seconds = DEFAULT_LAG_SECONDS
        self._buffer_length = math.ceil(self.lag_seconds * MAX_FPS)
        self._positions = np.zeros((self._buffer_length, 3))
        self._times = np.zeros(self._buffer_length)
        self._oldest = 0
        self._newest = 1
        self._timer = 0.0

        self._state = SwimmerState.ENTERING
        self._leader: Optional[GameObject] = None
        self._hit_timer = 0.0

        self._velocity = 0.0
        self._acceleration = 0.0

        self._behaviours: dict[SwimmerState, Callable[[float], None]] = {
            SwimmerState.ENTERING: self._enter,
            SwimmerState.FLOATING: self._float,
            SwimmerState.JOINING: self._join,
            SwimmerState.FOLLOWING: self._follow,
            SwimmerState.STILL: self._still,
            SwimmerState.HITTING: self._hit,
            SwimmerState.LEAVING: self._leave,
        }

    # --- public state ---------------------------------------------------

    @property
    def state(self) -> SwimmerState:
        """The swimmer's current behaviour."""
        return self._state

    @state.setter
    def state(self, value: SwimmerState) -> None:
        self._state = SwimmerState(value)

    @property
    def leader(self) -> Optional[GameObject]:
        """The object this swimmer trails behind, if any."""
        return self._leader

    @property
    def hit_timer(self) -> float:
        """Seconds spent in the hitting state."""
        return self._hit_timer

    @property
    def velocity(self) -> float:
        """Vertical velocity from the water physics."""
        return self._velocity

    def update(self, delta_time: float) -> None:
        """Run the behaviour for the current state."""
        behaviour = self._behaviours.get(self._state)
        if behaviour is not None:
            behaviour(delta_time)

    def join_trail(self, leader: GameObject) -> None:
        """Start following ``leader``."""
        self._state = SwimmerState.JOINING
        self._leader = leader
        self._positions[0] = leader.position
        self._positions[1] = leader.position

    def check_hit(self) -> bool:
        """Whether the swimmer has been hitting long enough to pass it on."""
        return self._state is SwimmerState.HITTING and self._hit_timer > _HIT_DURATION / 4

    # --- behaviours -----------------------------------------------------

    def _enter(self, delta_time: float) -> None:
        self._apply_water_physics(delta_time, True)
        if self.position[1] > SURFACE_Y:
            self._state = SwimmerState.FLOATING

    def _apply_water_physics(self, delta_time: float, apply_buoyancy: bool) -> None:
        collider = self.collider
        if collider is None:
            raise RuntimeError("a swimmer needs a collider for water physics")
        position = self.position
        half = collider.half_size()
        area = (2 * half[0]) * (2 * half[2])

        buoyancy = 0.0
        if apply_buoyancy:
            top = min(position[1] + half[1], SURFACE_Y)
            bottom = min(position[1] - half[1], SURFACE_Y)
            displaced = area * (top - bottom)
            buoyancy = FLUID_DENSITY * GRAVITY * displaced

        density = AIR_DENSITY if position[1] > SURFACE_Y else FLUID_DENSITY
        drag = DRAG_COEFF * density * ((self._velocity * self._velocity * area) / 2)

        self._acceleration += buoyancy / MASS
        self._acceleration -= GRAVITY
        self._velocity += self._acceleration * delta_time

        if self._velocity < 0:
            self._velocity += drag * delta_time
        else:
            self._velocity -= drag * delta_time

        position[1] += self._velocity * delta_time
        self._acceleration = 0.0
        self.position = position

    def _float(self, delta_time: float) -> None:
        self._apply_water_physics(delta_time, True)
        self.rotate(0.0, 5 * delta_time, 0.0)

    def _leave(self, delta_time: float) -> None:
        self._apply_water_physics(delta_time, False)
        if self.position[1] < -5 and self in self._manager:
            self._manager.remove(self)

    def _still(self, delta_time: float) -> None:
        leader = self._leader
        if (
            leader is not None
            and leader.name != "player"
            and isinstance(leader, Swimmer)
            and leader.check_hit()
        ):
            self._state = SwimmerState.HITTING

    def _trail_position(self, delta_time: float) -> np.ndarray:
        self._timer += delta_time

        # Once the ring is full the newest sample is overwritten.
        new_index = (self._newest + 1) % self._buffer_length
        if new_index != self._oldest:
            self._newest = new_index

        self._positions[self._newest] = self._leader.position
        self._times[self._newest] = self._timer

        target_time = self._timer - self.lag_seconds
        next_index = (self._oldest + 1) % self._buffer_length
        while self._times[next_index] < target_time:
            self._oldest = next_index
            next_index = (self._oldest + 1) % self._buffer_length

        span = self._times[next_index] - self._times[self._oldest]
        progress = 0.0
        if span > 0:
            progress = (target_time - self._times[self._oldest]) / span

        return lerp(self._positions[self._oldest], self._positions[next_index], progress)

    def _trail_rotation(self, delta_time: float) -> np.ndarray:
        return quaternion_slerp(self.rotation, self._leader.rotation, 1.4 * delta_time)

    def _seek_surface(self) -> None:
        position = self.position
        if position[1] == SURFACE_Y:
            return
        position[1] = _seek(position[1], SURFACE_Y, _SURFACE_SEEK_RATE)
        self.position = position

    def _join(self, delta_time: float) -> None:
        self._seek_surface()

        trail = self._trail_position(delta_time)
        step = normalize(trail - self.position) * (5 * delta_time)
        self.move_absolute(step)
        self.rotation = self._trail_rotation(delta_time)

        distance = length(trail - self.position)
        leader = self._leader
        leader_ready = leader.name != "swimmer" or (
            isinstance(leader, Swimmer) and leader.state is SwimmerState.FOLLOWING
        )
        if distance < 0.1 and leader_ready:
            self._state = SwimmerState.FOLLOWING

    def _follow(self, delta_time: float) -> None:
        self._seek_surface()
        self.position = self._trail_position(delta_time)
        self.rotation = self._trail_rotation(delta_time)

    def _hit(self, delta_time: float) -> None:
        self._hit_timer += delta_time
        position = self.position
        if self._hit_timer < _HIT_DURATION:
            position[1] = 2 * math.sin(8 * self._hit_timer)
            self.position = position
        else:
            position[1] = 0.0
            self.position = position
            self._state = SwimmerState.NOTHING