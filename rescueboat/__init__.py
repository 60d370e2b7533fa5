"""Game logic for a boat-rescue arcade game: math, collisions, entities, input, swimmers, the boat and cameras."""

__version__ = "0.1.0"