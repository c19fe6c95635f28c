# src/map/__init__.py

from .grid_map import GridMap
from .generator import MapGenerator

__all__ = ["GridMap", "MapGenerator"]
