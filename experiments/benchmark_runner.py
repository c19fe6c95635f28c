import os
import sys
import time

import matplotlib.pyplot as plt
import pandas as pd

# --- 路径设置 ---
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from experiments.benchmark_config import BenchmarkConfig as cfg
from src.collision import CachedOracle, CollisionChecker, GridMapOracle
from src.config import PathfindOptions
from src.map import GridMap, MapGenerator
from src.planning import PathfindError
from src.planning.planners import AStarPathfinder
from src.types import path_length


def run_trial(density: float, trial_idx: int) -> list:
    """One random map, every pathfinder variant. Returns one row per variant."""
    seed = cfg.RANDOM_SEED_BASE + trial_idx + int(density * 1000)
    grid_map = GridMap(cfg.MAP_WIDTH, cfg.MAP_HEIGHT, cfg.RESOLUTION, map_id=cfg.MAP_ID)
    generator = MapGenerator(obstacle_density=density,
                             min_size=cfg.OBSTACLE_MIN_SIZE,
                             max_size=cfg.OBSTACLE_MAX_SIZE,
                             clear_radius=cfg.CLEAR_RADIUS,
                             seed=seed)
    generator.generate(grid_map, keep_clear=[cfg.START, cfg.GOAL])

    variants = {
        'raw': PathfindOptions(max_distance=cfg.MAX_DISTANCE, simplify=False),
        'simplified': PathfindOptions(max_distance=cfg.MAX_DISTANCE),
        'exact': PathfindOptions(max_distance=cfg.MAX_DISTANCE, exact=True),
    }

    oracle = CachedOracle(GridMapOracle([grid_map]))
    checker = CollisionChecker(oracle)
    planner = AStarPathfinder(checker, config=cfg.PATHFIND_CONFIG)

    rows = []
    for name, options in variants.items():
        # 每个变体独立计数，且不复用上一变体的缓存
        checker.reset_stats()
        oracle.clear()

        search = planner.start(cfg.START, cfg.GOAL, options)
        t0 = time.perf_counter()
        slices = 0
        try:
            path = search.path
            while path is None:
                path = search.resume()
                slices += 1
            success = True
        except PathfindError:
            path = []
            success = False
        t1 = time.perf_counter()

        rows.append({
            'Density': density,
            'Trial': trial_idx,
            'Variant': name,
            'Success': success,
            'TimeMs': (t1 - t0) * 1000,
            'Slices': slices,
            'Expansions': search.expansions,
            'OracleQueries': checker.query_count,
            'Length': path_length(path),
            'Waypoints': len(path),
        })
    return rows


def run_experiment() -> pd.DataFrame:
    rows = []
    print(f"{'Density':<8} | {'Trial':<5} | {'Variant':<10} | {'OK':<5} | {'Time(ms)':<9} | {'Nodes':<6} | {'Len':<8}")
    print("-" * 70)
    for density in cfg.DENSITIES:
        for i in range(cfg.NUM_TRIALS):
            for row in run_trial(density, i):
                print(f"{density:<8.2f} | {i:<5} | {row['Variant']:<10} | {str(row['Success']):<5} | "
                      f"{row['TimeMs']:<9.1f} | {row['Expansions']:<6} | {row['Length']:<8.1f}")
                rows.append(row)
    return pd.DataFrame(rows)


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    ok = df[df['Success']]
    summary = ok.groupby(['Density', 'Variant']).agg(
        TimeMean=('TimeMs', 'mean'),
        NodesMean=('Expansions', 'mean'),
        LengthMean=('Length', 'mean'),
        WaypointsMean=('Waypoints', 'mean'),
    )
    summary['SuccessRate'] = df.groupby(['Density', 'Variant'])['Success'].mean() * 100
    return summary.reset_index()


def plot_comparisons(summary: pd.DataFrame, filename: str):
    fig, axes = plt.subplots(1, 4, figsize=(24, 5))
    metrics = [
        ('SuccessRate', 'Success Rate (%)'),
        ('TimeMean', 'Computation Time (ms)'),
        ('NodesMean', 'Expanded Nodes'),
        ('WaypointsMean', 'Waypoints'),
    ]
    for ax, (metric, ylabel) in zip(axes, metrics):
        for variant, data in summary.groupby('Variant'):
            ax.plot(data['Density'], data[metric], 'o-', label=variant)
        ax.set_xlabel('Obstacle Density')
        ax.set_ylabel(ylabel)
        ax.grid(True, linestyle=':', alpha=0.6)
    axes[0].legend()
    plt.tight_layout()
    fig.savefig(filename)
    plt.close(fig)


if __name__ == "__main__":
    print("=== Pathfinder benchmark ===")
    os.makedirs(cfg.LOG_DIR, exist_ok=True)
    timestamp = time.strftime("%Y%m%d_%H%M%S")

    df_results = run_experiment()
    df_results.to_csv(os.path.join(cfg.LOG_DIR, f"trials_{timestamp}.csv"), index=False)

    summary = summarize(df_results)
    print(summary.to_string(index=False))
    summary.to_csv(os.path.join(cfg.LOG_DIR, f"summary_{timestamp}.csv"), index=False)
    plot_comparisons(summary, os.path.join(cfg.LOG_DIR, f"summary_{timestamp}.png"))
