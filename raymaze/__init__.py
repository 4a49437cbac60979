"""Scene parsing, map validation, XPM images, player movement and a minimap for a raycasting maze."""

__version__ = "0.1.0"
__all__ = ["colors", "image", "xpm", "scene", "grid", "player", "minimap"]