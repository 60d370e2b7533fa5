import math
import random

import numpy as np
import pytest

from rescueboat.entities import Entity, EntityManager
from rescueboat.swimmer import SwimmerState
from rescueboat.swimmer_manager import SwimmerManager


@pytest.fixture
def entities():
    return EntityManager()


@pytest.fixture
def swimmers(entities):
    return SwimmerManager(entities, 12.0, random.Random(7))


def test_empty_manager_is_ready(swimmers):
    assert len(swimmers) == 0
    assert swimmers.is_ready_to_spawn()


def test_first_update_spawns(swimmers, entities):
    swimmers.update(0.01)
    assert len(swimmers) == 1
    swimmer = swimmers.get_swimmer(0)
    assert swimmer in entities
    assert swimmer.name == "swimmer"
    assert swimmer.collider is not None
    assert np.allclose(swimmer.scale, (0.05, 0.05, 0.05))


def test_spawn_position_within_level(swimmers):
    for _ in range(20):
        swimmer = swimmers.spawn_swimmer()
        x, y, z = swimmer.position
        assert y == -5.0
        assert math.hypot(x, z) <= 12.0 + 1e-9


def test_spawn_waits_for_delay(swimmers):
    swimmers.update(0.01)
    assert not swimmers.is_ready_to_spawn()
    swimmers.update(1.0)
    assert len(swimmers) == 1
    swimmers.update(2.5)
    assert len(swimmers) == 2
    assert swimmers.current_tts == 0.0


def test_spawn_capped_at_maximum(swimmers):
    for _ in range(20):
        swimmers.update(3.0)
    assert len(swimmers) == 5
    assert not swimmers.is_ready_to_spawn()


def test_disabled_manager_does_not_spawn(swimmers):
    swimmers.enabled = False
    swimmers.update(10.0)
    assert len(swimmers) == 0


def test_get_swimmer_out_of_range(swimmers):
    swimmers.update(0.01)
    assert swimmers.get_swimmer(-1) is None
    assert swimmers.get_swimmer(1) is None


def test_reset_sends_swimmers_away(swimmers):
    swimmers.update(0.01)
    swimmers.update(3.0)
    spawned = swimmers.swimmers
    swimmers.reset()
    assert len(swimmers) == 0
    assert swimmers.current_tts == 0.0
    assert all(s.state is SwimmerState.LEAVING for s in spawned)


def test_attach_swaps_out_and_joins(swimmers, entities):
    for _ in range(3):
        swimmers.spawn_swimmer()
    first, second, third = swimmers.swimmers
    leader = Entity(None, None, "player", entities)
    swimmers.attach_swimmer(first, leader, 0)
    assert swimmers.swimmers == (third, second)
    assert first.state is SwimmerState.JOINING
    assert first.leader is leader


def test_attach_bad_index_raises(swimmers, entities):
    swimmer = swimmers.spawn_swimmer()
    leader = Entity(None, None, "player", entities)
    with pytest.raises(IndexError):
        swimmers.attach_swimmer(swimmer, leader, 3)


def test_same_seed_gives_same_positions():
    a = SwimmerManager(EntityManager(), 12.0, random.Random(3))
    b = SwimmerManager(EntityManager(), 12.0, random.Random(3))
    pa = [a.spawn_swimmer().position for _ in range(4)]
    pb = [b.spawn_swimmer().position for _ in range(4)]
    assert all(np.allclose(x, y) for x, y in zip(pa, pb))