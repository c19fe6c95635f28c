import os
import sys

# Ensure src can be imported if this config is used standalone or imported from elsewhere
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.config import PathfindConfig
from src.types import Position

class BenchmarkConfig:
    # --- Experiment Settings ---
    DENSITIES = [0.0, 0.05, 0.10, 0.15, 0.20]   # Obstacle area fraction
    NUM_TRIALS = 10                             # Maps per density
    RANDOM_SEED_BASE = 1000                     # Base seed for reproducibility

    # --- Output Paths ---
    _BASE_DIR = os.path.dirname(os.path.abspath(__file__))
    _PROJECT_DIR = os.path.dirname(_BASE_DIR)
    LOG_DIR = os.path.join(_PROJECT_DIR, "logs", "experiments_pathfind")

    # --- Map Parameters (map units) ---
    MAP_ID = "bench"
    PHYS_WIDTH = 640.0
    PHYS_HEIGHT = 640.0
    RESOLUTION = 8.0

    MAP_WIDTH = int(PHYS_WIDTH / RESOLUTION)
    MAP_HEIGHT = int(PHYS_HEIGHT / RESOLUTION)

    # --- Start & Goal ---
    START = Position(40.0, 40.0, MAP_ID)
    GOAL = Position(600.0, 600.0, MAP_ID)
    CLEAR_RADIUS = 24.0

    # --- Obstacles ---
    OBSTACLE_MIN_SIZE = 16.0
    OBSTACLE_MAX_SIZE = 96.0

    # --- Pathfinder ---
    PATHFIND_CONFIG = PathfindConfig()
    MAX_DISTANCE = 2000.0
