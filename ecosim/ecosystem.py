"""The world: a population of entities, food and running statistics."""

from __future__ import annotations

import dataclasses
import logging
import random
from dataclasses import dataclass

import pygame

from .entity import Entity, EntityType
from .structs import Food, Vector2D

logger = logging.getLogger(__name__)

_MAX_FOOD = 100
_INITIAL_FOOD = 20
_DEFAULT_FOOD_ENERGY = 25.0
_PLANT_PHOTOSYNTHESIS = 0.1
_PLANT_GROWTH_CHANCE = 0.01
_FOOD_SIZE = 6.0

_NAME_PREFIXES = {
    EntityType.HERBIVORE: "Herbivore",
    EntityType.CARNIVORE: "Carnivore",
    EntityType.PLANT: "Plant",
}


@dataclass
class Statistics:
    """Population counters of an ecosystem."""

    total_herbivores: int = 0
    total_carnivores: int = 0
    total_plants: int = 0
    total_food: int = 0
    deaths_today: int = 0
    births_today: int = 0


class Ecosystem:
    """A bounded world holding entities and food sources."""

    def __init__(
        self,
        width: float,
        height: float,
        max_entities: int = 500,
        rng: random.Random | None = None,
    ) -> None:
        self.world_width = width
        self.world_height = height
        self.max_entities = max_entities
        self._rng = rng if rng is not None else random.Random()
        self._entities: list[Entity] = []
        self._food: list[Food] = []
        self._day_cycle = 0
        self._stats = Statistics()
        logger.info("Ecosystem created: %gx%g", width, height)

    @property
    def entity_count(self) -> int:
        return len(self._entities)

    @property
    def food_count(self) -> int:
        return len(self._food)

    @property
    def statistics(self) -> Statistics:
        """A snapshot of the current statistics."""
        return dataclasses.replace(self._stats)

    @property
    def day_cycle(self) -> int:
        return self._day_cycle

    @property
    def entities(self) -> tuple[Entity, ...]:
        return tuple(self._entities)

    @property
    def food_sources(self) -> tuple[Food, ...]:
        return tuple(self._food)

    def initialize(
        self, initial_herbivores: int, initial_carnivores: int, initial_plants: int
    ) -> None:
        """Reset the world and populate it with fresh entities and food."""
        self._entities.clear()
        self._food.clear()
        for kind, count in (
            (EntityType.HERBIVORE, initial_herbivores),
            (EntityType.CARNIVORE, initial_carnivores),
            (EntityType.PLANT, initial_plants),
        ):
            for _ in range(count):
                self._spawn_random_entity(kind)
        self.spawn_food(_INITIAL_FOOD)
        logger.info("Ecosystem initialised with %d entities", len(self._entities))

    def update(self, delta_time: float) -> None:
        """Advance the whole world by one step."""
        for entity in self._entities:
            entity.update(delta_time)
        self.handle_eating()
        self.handle_reproduction()
        self.remove_dead_entities()
        self._handle_plant_growth()
        self._update_statistics()
        self._day_cycle += 1

    def spawn_food(self, count: int) -> None:
        """Scatter up to ``count`` food items, never exceeding the food limit."""
        for _ in range(count):
            if len(self._food) < _MAX_FOOD:
                self._food.append(Food(self._random_position(), _DEFAULT_FOOD_ENERGY))

    def remove_dead_entities(self) -> None:
        """Drop dead entities and count them as deaths."""
        before = len(self._entities)
        self._entities = [entity for entity in self._entities if entity.is_alive]
        self._stats.deaths_today += before - len(self._entities)

    def handle_reproduction(self) -> None:
        """Let eligible entities reproduce while the population has room."""
        newborns = []
        for entity in self._entities:
            if entity.can_reproduce() and len(self._entities) < self.max_entities:
                baby = entity.reproduce()
                if baby is not None:
                    newborns.append(baby)
                    self._stats.births_today += 1
        self._entities.extend(newborns)

    def handle_eating(self) -> None:
        """Feed the entities; plants draw a little energy from the sun."""
        for entity in self._entities:
            if entity.kind is EntityType.PLANT:
                entity.eat(_PLANT_PHOTOSYNTHESIS)

    def add_entity(self, entity: Entity) -> None:
        self._entities.append(entity)

    def add_food(self, position: Vector2D, energy: float = _DEFAULT_FOOD_ENERGY) -> None:
        self._food.append(Food(position, energy))

    def render(self, surface: pygame.Surface) -> None:
        """Draw food first, then every entity."""
        half = _FOOD_SIZE / 2.0
        for food in self._food:
            pygame.draw.rect(
                surface,
                dataclasses.astuple(food.color),
                pygame.Rect(
                    int(food.position.x - half),
                    int(food.position.y - half),
                    int(_FOOD_SIZE),
                    int(_FOOD_SIZE),
                ),
            )
        for entity in self._entities:
            entity.render(surface)

    def _update_statistics(self) -> None:
        stats = self._stats
        stats.total_food = len(self._food)
        kinds = [entity.kind for entity in self._entities]
        stats.total_herbivores = kinds.count(EntityType.HERBIVORE)
        stats.total_carnivores = kinds.count(EntityType.CARNIVORE)
        stats.total_plants = kinds.count(EntityType.PLANT)

    def _spawn_random_entity(self, kind: EntityType) -> None:
        if len(self._entities) >= self.max_entities:
            return
        counters = {
            EntityType.HERBIVORE: self._stats.total_herbivores,
            EntityType.CARNIVORE: self._stats.total_carnivores,
            EntityType.PLANT: self._stats.total_plants,
        }
        name = f"{_NAME_PREFIXES[kind]}_{counters[kind]}"
        child_rng = random.Random(self._rng.getrandbits(64))
        self._entities.append(Entity(kind, self._random_position(), name, child_rng))

    def _random_position(self) -> Vector2D:
        return Vector2D(
            self._rng.uniform(0.0, self.world_width),
            self._rng.uniform(0.0, self.world_height),
        )

    def _handle_plant_growth(self) -> None:
        if (
            self._rng.random() < _PLANT_GROWTH_CHANCE
            and len(self._entities) < self.max_entities
        ):
            self._spawn_random_entity(EntityType.PLANT)

    def __repr__(self) -> str:
        return (
            f"Ecosystem({self.world_width:g}x{self.world_height:g}, "
            f"entities={len(self._entities)}, food={len(self._food)})"
        )