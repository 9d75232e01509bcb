"""Living entities of the simulation: herbivores, carnivores and plants."""

from __future__ import annotations

import copy
import dataclasses
import enum
import logging
import random
from dataclasses import dataclass

import pygame

from .structs import Color, Vector2D

logger = logging.getLogger(__name__)


class EntityType(enum.Enum):
    HERBIVORE = "herbivore"
    CARNIVORE = "carnivore"
    PLANT = "plant"


@dataclass(frozen=True)
class _Profile:
    energy: float
    max_energy: float
    max_age: int
    color: Color
    size: float
    consumption: float


_PROFILES = {
    EntityType.HERBIVORE: _Profile(80.0, 150.0, 200, Color.blue(), 8.0, 1.5),
    EntityType.CARNIVORE: _Profile(100.0, 200.0, 150, Color.red(), 12.0, 2.0),
    # Plants generate energy rather than spend it.
    EntityType.PLANT: _Profile(50.0, 100.0, 300, Color.green(), 6.0, -0.5),
}

_DIRECTION_CHANGE_CHANCE = 0.02
_MOVE_SPEED = 20.0
_MOVE_COST = 0.1
_AGING_RATE = 10.0
_REPRODUCTION_THRESHOLD = 0.8
_REPRODUCTION_MIN_AGE = 20
_REPRODUCTION_CHANCE = 0.3
_REPRODUCTION_COST = 0.6
_OFFSPRING_ENERGY = 0.7
_OFFSPRING_SIZE = 0.8
_LOW_ENERGY = 0.3


class Entity:
    """A creature or plant with energy, age and movement."""

    def __init__(
        self,
        kind: EntityType,
        position: Vector2D,
        name: str = "Unnamed",
        rng: random.Random | None = None,
    ) -> None:
        profile = _PROFILES[kind]
        self._kind = kind
        self._rng = rng if rng is not None else random.Random()
        self._energy = profile.energy
        self._max_energy = profile.max_energy
        self._max_age = profile.max_age
        self._age = 0
        self._alive = True
        self.position = position
        self.color = profile.color
        self.size = profile.size
        self.name = name
        self._velocity = self._random_direction()
        logger.info("Entity created: %s at %s", name, position)

    @property
    def energy(self) -> float:
        return self._energy

    @property
    def energy_percentage(self) -> float:
        return self._energy / self._max_energy

    @property
    def age(self) -> int:
        return self._age

    @property
    def is_alive(self) -> bool:
        return self._alive

    @property
    def kind(self) -> EntityType:
        return self._kind

    @property
    def velocity(self) -> Vector2D:
        return self._velocity

    def update(self, delta_time: float) -> None:
        """Advance the entity's life by one step."""
        if not self._alive:
            return
        self._energy -= _PROFILES[self._kind].consumption * delta_time
        self._age += int(delta_time * _AGING_RATE)
        self.move(delta_time)
        self._check_vitality()

    def move(self, delta_time: float) -> None:
        """Move along the current velocity, occasionally changing direction."""
        if self._kind is EntityType.PLANT:
            return
        if self._rng.random() < _DIRECTION_CHANGE_CHANCE:
            self._velocity = self._random_direction()
        self.position = self.position + self._velocity * (delta_time * _MOVE_SPEED)
        self._energy -= self._velocity.distance(Vector2D()) * delta_time * _MOVE_COST

    def eat(self, energy: float) -> None:
        """Gain energy, capped at the entity's maximum."""
        self._energy = min(self._energy + energy, self._max_energy)
        logger.debug("%s eats and gains %g energy", self.name, energy)

    def can_reproduce(self) -> bool:
        return (
            self._alive
            and self._energy > self._max_energy * _REPRODUCTION_THRESHOLD
            and self._age > _REPRODUCTION_MIN_AGE
        )

    def reproduce(self) -> Entity | None:
        """Possibly produce an offspring, paying an energy cost."""
        if not self.can_reproduce():
            return None
        if self._rng.random() < _REPRODUCTION_CHANCE:
            self._energy *= _REPRODUCTION_COST
            return self.offspring()
        return None

    def offspring(self) -> Entity:
        """A young, smaller copy of this entity with less energy."""
        child = copy.copy(self)
        child._rng = random.Random(self._rng.getrandbits(64))
        child.name = f"{self.name}_copy"
        child._energy = self._energy * _OFFSPRING_ENERGY
        child._age = 0
        child._alive = True
        child.size = self.size * _OFFSPRING_SIZE
        logger.info("Offspring created: %s", child.name)
        return child

    def display_color(self) -> Color:
        """The colour to draw with, reddened when energy runs low."""
        ratio = self.energy_percentage
        if ratio >= _LOW_ENERGY:
            return self.color
        ratio = max(ratio, 0.0)
        return dataclasses.replace(
            self.color,
            r=255,
            g=int(self.color.g * ratio),
            b=int(self.color.b * ratio),
        )

    def render(self, surface: pygame.Surface) -> None:
        """Draw the entity, with an energy bar for animals."""
        if not self._alive:
            return
        left = self.position.x - self.size / 2.0
        top = self.position.y - self.size / 2.0
        pygame.draw.rect(
            surface,
            dataclasses.astuple(self.display_color()),
            pygame.Rect(int(left), int(top), int(self.size), int(self.size)),
        )
        if self._kind is not EntityType.PLANT:
            bar_width = int(self.size * max(self.energy_percentage, 0.0))
            if bar_width > 0:
                pygame.draw.rect(
                    surface,
                    (0, 255, 0, 255),
                    pygame.Rect(int(left), int(top - 3.0), bar_width, 2),
                )

    def _random_direction(self) -> Vector2D:
        return Vector2D(self._rng.uniform(-1.0, 1.0), self._rng.uniform(-1.0, 1.0))

    def _check_vitality(self) -> None:
        if self._energy <= 0.0 or self._age >= self._max_age:
            self._alive = False
            cause = "starvation" if self._energy <= 0.0 else "old age"
            logger.info("%s dies - %s", self.name, cause)

    def __repr__(self) -> str:
        return (
            f"Entity({self._kind.name}, {self.name!r}, energy={self._energy:g}, "
            f"age={self._age}, alive={self._alive})"
        )