import pytest

from rescueboat.entities import Entity, EntityManager, default_manager


class _Counting(Entity):
    def __init__(self, *args, **kwargs):
        self.ticks = []
        super().__init__(*args, **kwargs)

    def update(self, delta_time):
        self.ticks.append(delta_time)


@pytest.fixture
def manager():
    return EntityManager()


def test_entity_registers_with_manager(manager):
    entity = Entity("mesh", "material", "boat", manager)
    assert entity in manager
    assert len(manager) == 1


def test_default_name_is_gameobject(manager):
    entity = Entity("mesh", "material", manager=manager)
    assert entity.name == "GameObject"


def test_default_manager_is_shared():
    assert default_manager() is default_manager()
    entity = Entity(object(), object(), "shared")
    assert entity in default_manager()


def test_identifier_depends_on_mesh_and_material(manager):
    mesh, material = object(), object()
    first = Entity(mesh, material, "a", manager)
    second = Entity(mesh, material, "b", manager)
    other = Entity(object(), material, "c", manager)
    assert first.identifier == second.identifier
    assert first.identifier != other.identifier


def test_adding_twice_raises(manager):
    entity = Entity("mesh", "material", "boat", manager)
    with pytest.raises(ValueError):
        manager.add(entity)
    assert len(manager) == 1


def test_get_returns_first_match_or_none(manager):
    first = Entity("m", "x", "swimmer", manager)
    Entity("m", "x", "swimmer", manager)
    assert manager.get("swimmer") is first
    assert manager.get("missing") is None


def test_update_calls_enabled_entities(manager):
    entity = _Counting("m", "x", "a", manager)
    disabled = _Counting("m", "x", "b", manager)
    disabled.enabled = False
    manager.update(0.5)
    assert entity.ticks == [0.5]
    assert disabled.ticks == []


def test_remove_is_deferred_until_update(manager):
    entity = _Counting("m", "x", "a", manager)
    manager.remove(entity)
    assert entity in manager
    assert entity.enabled is False
    manager.update(0.1)
    assert entity not in manager
    assert entity.ticks == []
    assert entity.released is True


def test_remove_without_release(manager):
    entity = Entity("m", "x", "a", manager)
    manager.remove(entity, release=False)
    manager.update(0.1)
    assert entity not in manager
    assert entity.released is False


def test_remove_missing_entity_raises(manager):
    other = EntityManager()
    entity = Entity("m", "x", "a", other)
    with pytest.raises(ValueError):
        manager.remove(entity)


def test_remove_by_name(manager):
    entity = Entity("m", "x", "target", manager)
    keep = Entity("m", "x", "keep", manager)
    manager.remove_by_name("target")
    manager.update(0.0)
    assert list(manager) == [keep]
    assert entity.released is True


def test_remove_by_unknown_name_raises(manager):
    with pytest.raises(KeyError):
        manager.remove_by_name("nobody")


def test_double_removal_is_harmless(manager):
    entity = Entity("m", "x", "a", manager)
    manager.remove(entity)
    manager.remove(entity)
    manager.update(0.0)
    assert len(manager) == 0


def test_entity_spawned_during_update_is_updated(manager):
    spawned = []

    class Spawner(Entity):
        def update(self, delta_time):
            if not spawned:
                spawned.append(_Counting("m", "x", "child", manager))

    Spawner("m", "x", "spawner", manager)
    manager.update(0.25)
    assert len(manager) == 2
    assert spawned[0].ticks == [0.25]