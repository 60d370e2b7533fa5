"""Spawns swimmers at random spots in the level and hands them to the boat."""

from __future__ import annotations

import math
import random
from typing import Optional

import numpy as np

from rescueboat.entities import EntityManager, default_manager
from rescueboat.gameobject import GameObject
from rescueboat.swimmer import Swimmer, SwimmerState

SWIMMER_MESH = "Assets\\Models\\swimmer.obj"
SWIMMER_MATERIAL = "swimmer"
SPAWN_DEPTH = -5.0


class SwimmerManager:
    """Keeps the floating swimmers and spawns new ones over time."""

    def __init__(
        self,
        entity_manager: Optional[EntityManager] = None,
        level_radius: float = 12.0,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.entity_manager = entity_manager if entity_manager is not None else default_manager()
        self.level_radius = level_radius
        self.rng = rng if rng is not None else random.Random()
        self.enabled = True
        self.max_swimmer_count = 5
        self.max_tts = 3.0
        self.current_tts = 0.0
        self.swimmer_mesh = SWIMMER_MESH
        self.swimmer_material = SWIMMER_MATERIAL
        self._swimmers: list[Swimmer] = []
        self.reset()

    def __len__(self) -> int:
        return len(self._swimmers)

    @property
    def swimmers(self) -> tuple[Swimmer, ...]:
        """The swimmers still waiting in the water."""
        return tuple(self._swimmers)

    def _next_position(self) -> np.ndarray:
        theta = self.rng.uniform(0.0, 2 * math.pi)
        radius = self.rng.uniform(0.0, self.level_radius)
        return np.array([math.sin(theta) * radius, SPAWN_DEPTH, math.cos(theta) * radius])

    def is_ready_to_spawn(self) -> bool:
        """Whether another swimmer may appear now."""
        if not self._swimmers:
            return True
        return len(self._swimmers) < self.max_swimmer_count and self.current_tts >= self.max_tts

    def reset(self) -> None:
        """Send every waiting swimmer away and restart the spawn timer."""
        for swimmer in self._swimmers:
            swimmer.state = SwimmerState.LEAVING
        self._swimmers.clear()
        self.current_tts = 0.0

    def update(self, delta_time: float) -> None:
        """Advance the spawn timer and spawn a swimmer when due."""
        if not self.enabled:
            return
        self.current_tts += delta_time
        if self.is_ready_to_spawn():
            self.spawn_swimmer()
            self.current_tts = 0.0

    def spawn_swimmer(self) -> Swimmer:
        """Create a swimmer below a random point of the level."""
        swimmer = Swimmer(self.swimmer_mesh, self.swimmer_material, "swimmer", self.entity_manager)
        swimmer.scale = (0.05, 0.05, 0.05)
        swimmer.add_collider((0.9, 0.9, 0.9), (0.0, 0.0, 0.0))
        swimmer.position = self._next_position()
        self._swimmers.append(swimmer)
        return swimmer

    def get_swimmer(self, index: int) -> Optional[Swimmer]:
        """The waiting swimmer at ``index``, or None when out of range."""
        if index < 0 or index >= len(self._swimmers):
            return None
        return self._swimmers[index]

    def attach_swimmer(self, swimmer: Swimmer, leader: GameObject, index: int) -> None:
        """Make ``swimmer`` follow ``leader`` and drop it from the waiting list."""
        if index < 0 or index >= len(self._swimmers):
            raise IndexError(f"no waiting swimmer at index {index}")
        swimmer.join_trail(leader)
        last = len(self._swimmers) - 1
        self._swimmers[index], self._swimmers[last] = self._swimmers[last], self._swimmers[index]
        self._swimmers.pop()