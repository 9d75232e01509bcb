"""The game loop: events, simulation steps and drawing."""

from __future__ import annotations

import logging
import time

import pygame

from .ecosystem import Ecosystem
from .window import Window

logger = logging.getLogger(__name__)

_INITIAL_HERBIVORES = 20
_INITIAL_CARNIVORES = 5
_INITIAL_PLANTS = 30
_MAX_ENTITIES = 500
_FOOD_PER_KEYPRESS = 10
_SPEED_FACTOR = 1.5
_FRAME_DELAY_MS = 16
_STATS_INTERVAL = 2.0


class GameEngine:
    """Runs an ecosystem in a window and reacts to the keyboard."""

    def __init__(self, title: str, width: float, height: float) -> None:
        self._window = Window(title, width, height)
        self._ecosystem = Ecosystem(width, height, _MAX_ENTITIES)
        self._running = False
        self._paused = False
        self._time_scale = 1.0
        self._last_update = 0.0
        self._stats_timer = 0.0

    @property
    def window(self) -> Window:
        return self._window

    @property
    def ecosystem(self) -> Ecosystem:
        return self._ecosystem

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def is_paused(self) -> bool:
        return self._paused

    @property
    def time_scale(self) -> float:
        return self._time_scale

    def initialize(self) -> None:
        """Open the window and populate the world; raises WindowError on failure."""
        self._window.initialize()
        self._populate()
        self._running = True
        self._last_update = time.perf_counter()
        logger.info("Game engine initialised")

    def run(self) -> None:
        """Loop until the user quits."""
        logger.info("Starting game loop")
        while self._running:
            now = time.perf_counter()
            delta_time = now - self._last_update
            self._last_update = now
            self.handle_events()
            if not self._paused:
                self.update(delta_time * self._time_scale)
                pygame.time.delay(_FRAME_DELAY_MS)
            self.render()

    def shutdown(self) -> None:
        """Stop the loop and close the window."""
        self._running = False
        self._window.shutdown()
        logger.info("Game engine stopped")

    def handle_events(self) -> None:
        """Process all pending window events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False
            elif event.type == pygame.KEYDOWN:
                self.handle_input(event.key)

    def handle_input(self, key: int) -> None:
        """React to one key press."""
        if key == pygame.K_ESCAPE:
            self._running = False
        elif key == pygame.K_SPACE:
            self._paused = not self._paused
            logger.info("Simulation paused" if self._paused else "Simulation resumed")
        elif key == pygame.K_r:
            self._populate()
            logger.info("Simulation reset")
        elif key == pygame.K_f:
            self._ecosystem.spawn_food(_FOOD_PER_KEYPRESS)
            logger.info("Food added")
        elif key == pygame.K_UP:
            self._time_scale *= _SPEED_FACTOR
            logger.info("Speed: %gx", self._time_scale)
        elif key == pygame.K_DOWN:
            self._time_scale /= _SPEED_FACTOR
            logger.info("Speed: %gx", self._time_scale)

    def update(self, delta_time: float) -> None:
        """Step the world and report statistics every few seconds."""
        self._ecosystem.update(delta_time)
        self._stats_timer += delta_time
        if self._stats_timer >= _STATS_INTERVAL:
            stats = self._ecosystem.statistics
            logger.info(
                "Stats - Herbivores: %d, Carnivores: %d, Plants: %d, "
                "Births: %d, Deaths: %d",
                stats.total_herbivores,
                stats.total_carnivores,
                stats.total_plants,
                stats.births_today,
                stats.deaths_today,
            )
            self._stats_timer = 0.0

    def render(self) -> None:
        """Draw one frame."""
        surface = self._window.surface
        if surface is None:
            return
        self._window.clear()
        self._ecosystem.render(surface)
        self._window.present()

    def _populate(self) -> None:
        self._ecosystem.initialize(
            _INITIAL_HERBIVORES, _INITIAL_CARNIVORES, _INITIAL_PLANTS
        )