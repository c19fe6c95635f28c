# src/planning/__init__.py

from .errors import PathfindError, UnsupportedError, NoPathError

__all__ = ["PathfindError", "UnsupportedError", "NoPathError"]
