# src/collision/__init__.py

from .oracle import (
    CollisionOracle,
    FunctionOracle,
    OpenPlaneOracle,
    RectangleOracle,
    GridMapOracle,
    CachedOracle,
)
from .checker import CollisionChecker
# geometry 作为底层库，不直接暴露到顶层

__all__ = [
    "CollisionOracle",
    "FunctionOracle",
    "OpenPlaneOracle",
    "RectangleOracle",
    "GridMapOracle",
    "CachedOracle",
    "CollisionChecker",
]
