import sys
import os
import time
import argparse

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from jungle_maze.core.config import MazeConfig
from jungle_maze.core.complexity import MazePostProcessor
from jungle_maze.algo.pipeline import generate
from jungle_maze.algo.solvers import Solver, SolverType

# ==========================================
# GLOBAL CONFIGURATION
# Add or remove solver names here to include/exclude them from the race.
# ==========================================
ENABLED_SOLVERS = [
    "bfs",
    "dfs",
    "dijkstra",
    "astar",
]

def run_benchmark():
    parser = argparse.ArgumentParser(description="Solver Benchmark")
    parser.add_argument("--size", type=int, default=201, help="Maze side (forced odd)")
    parser.add_argument("--algo", type=str, default="kruskal", choices=["prim", "kruskal"], help="Generation Algorithm")
    parser.add_argument("--loops", type=float, default=0.05, help="Extra loop fraction (0.0-1.0)")
    parser.add_argument("--extra-ways", type=int, default=20, help="Extra ways to open")
    parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    args = parser.parse_args()

    cfg = MazeConfig(size=args.size, algo=args.algo, loop_fraction=args.loops,
                     extra_ways=args.extra_ways, seed=args.seed).normalized()

    print(f"=== MAZE SOLVER BENCHMARK ===")
    print(f"Size: {cfg.size}x{cfg.size} | Algo: {cfg.algo} | Loops: {cfg.loop_fraction} | Extra ways: {cfg.extra_ways}")
    print(f"Solvers: {', '.join(ENABLED_SOLVERS)}")
    print("-" * 50)

    # 1. Generate Maze
    t0 = time.time()
    grid = generate(cfg)
    print(f"Generation Complete in {time.time() - t0:.4f}s.")
    print(f"Stats: {MazePostProcessor.calculate_stats(grid)}")
    print("-" * 50)

    # 2. Race Loop
    results = []
    for name in ENABLED_SOLVERS:
        print(f"Running {name.upper()}...", end="", flush=True)
        # Explored/Solution marks of the previous run must not leak into this one
        grid.clear_marks()
        solver = Solver(grid, SolverType.from_name(name))

        t_start = time.time()
        solver.run_all()
        duration = time.time() - t_start

        print(f" Done ({duration:.4f}s) | Path: {solver.shortest_path_steps}")
        results.append({
            "name": solver.strategy.label,
            "time": duration,
            "steps": solver.steps,
            "path": solver.shortest_path_steps,
            "weight": solver.total_weight,
            "status": solver.status.value,
        })

    # 3. Leaderboard
    print("=" * 72)
    print(f"{'RANK':<5} | {'ALGORITHM':<10} | {'TIME (s)':<10} | {'STEPS':<8} | {'PATH':<8} | {'WEIGHT':<8}")
    print("-" * 72)

    # Cheapest route first, then fewest explored cells
    results.sort(key=lambda x: (x['weight'], x['steps']))

    for i, res in enumerate(results):
        print(f"{i+1:<5} | {res['name']:<10} | {res['time']:<10.4f} | {res['steps']:<8} | {res['path']:<8} | {res['weight']:<8}")
    print("=" * 72)

if __name__ == "__main__":
    run_benchmark()
