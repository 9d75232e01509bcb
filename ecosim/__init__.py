"""Real-time ecosystem simulator with herbivores, carnivores and plants, drawn with pygame."""

__version__ = "0.1.0"
__all__ = ["structs", "entity", "ecosystem", "window", "engine", "main"]