"""A pygame-backed window that the simulation draws into."""

from __future__ import annotations

import dataclasses
import logging

import pygame

from .structs import Color

logger = logging.getLogger(__name__)

_BACKGROUND = Color(30, 30, 30)


class WindowError(RuntimeError):
    """Raised when the display or the window cannot be created."""


class Window:
    """An application window with a drawing surface."""

    def __init__(self, title: str, width: float, height: float) -> None:
        self.title = title
        self.width = width
        self.height = height
        self._surface: pygame.Surface | None = None

    @property
    def surface(self) -> pygame.Surface | None:
        """The drawing surface, or None while the window is closed."""
        return self._surface

    @property
    def is_initialized(self) -> bool:
        return self._surface is not None

    def initialize(self) -> None:
        """Open the display and create the window."""
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise WindowError(f"display initialisation failed: {exc}") from exc
        try:
            surface = pygame.display.set_mode((int(self.width), int(self.height)))
        except pygame.error as exc:
            pygame.quit()
            raise WindowError(f"window creation failed: {exc}") from exc
        pygame.display.set_caption(self.title)
        self._surface = surface
        logger.info("Window ready: %s (%gx%g)", self.title, self.width, self.height)

    def shutdown(self) -> None:
        """Close the window and release the display."""
        self._surface = None
        pygame.display.quit()
        pygame.quit()
        logger.info("Window closed")

    def clear(self, color: Color = _BACKGROUND) -> None:
        """Fill the whole surface with one colour."""
        if self._surface is not None:
            self._surface.fill(dataclasses.astuple(color))

    def present(self) -> None:
        """Show what has been drawn since the last frame."""
        if self._surface is not None:
            pygame.display.flip()

    def __enter__(self) -> Window:
        self.initialize()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()