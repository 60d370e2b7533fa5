"""Renderable entities and the manager that updates and removes them."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Iterator, Optional

from rescueboat.gameobject import GameObject


class Entity(GameObject):
    """A game object that draws a mesh with a material.

    A new entity registers itself with an entity manager, which then runs
    its per-frame update.
    """

    def __init__(
        self,
        mesh: Any,
        material: Any,
        name: Optional[str] = None,
        manager: Optional["EntityManager"] = None,
    ) -> None:
        super().__init__() if name is None else super().__init__(name)
        self.mesh = mesh
        self.material = material
        self.released = False
        self._identifier = f"{id(material):x}{id(mesh):x}"
        (manager if manager is not None else default_manager()).add(self)

    @property
    def identifier(self) -> str:
        """Key shared by every entity using the same material and mesh."""
        return self._identifier


@dataclass(frozen=True)
class _Removal:
    entity: Entity
    release: bool


class EntityManager:
    """Keeps the live entities, updates them and removes them between frames."""

    def __init__(self) -> None:
        self._entities: list[Entity] = []
        self._pending: list[_Removal] = []

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(list(self._entities))

    def __contains__(self, entity: object) -> bool:
        return any(existing is entity for existing in self._entities)

    def add(self, entity: Entity) -> None:
        """Add an entity; adding one already present is an error."""
        if entity in self:
            raise ValueError(
                f"cannot add entity {entity.name} because it is already in the entity manager"
            )
        self._entities.append(entity)

    def get(self, name: str) -> Optional[Entity]:
        """The first entity with the given name, or None."""
        return next((entity for entity in self._entities if entity.name == name), None)

    def remove(self, entity: Entity, release: bool = True) -> None:
        """Disable an entity and drop it at the end of the next update."""
        if entity not in self:
            raise ValueError(
                f"cannot remove entity {entity.name} because it is not in the entity manager"
            )
        entity.enabled = False
        self._pending.append(_Removal(entity, release))

    def remove_by_name(self, name: str, release: bool = True) -> None:
        """Disable the first entity with ``name`` and drop it after the next update."""
        entity = self.get(name)
        if entity is None:
            raise KeyError(f"entity of name {name} does not exist in the entity manager")
        entity.enabled = False
        self._pending.append(_Removal(entity, release))

    def _drop(self, entity: Entity, release: bool) -> None:
        for index, existing in enumerate(self._entities):
            if existing is entity:
                del self._entities[index]
                break
        else:
            return
        if release:
            entity.released = True

    def update(self, delta_time: float) -> None:
        """Update every enabled entity, then carry out pending removals."""
        # Entities added during the loop are updated in the same frame.
        for entity in self._entities:
            if entity.enabled:
                GameObject.update(entity, delta_time)
                entity.update(delta_time)

        pending, self._pending = self._pending, []
        for removal in pending:
            self._drop(removal.entity, removal.release)


@lru_cache(maxsize=None)
def default_manager() -> EntityManager:
    """The shared entity manager used when none is given."""
    return EntityManager()