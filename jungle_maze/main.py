import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'jungle_maze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

SOLVER_CHOICES = ["bfs", "dfs", "dijkstra", "astar"]

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def add_maze_options(parser: argparse.ArgumentParser):
    parser.add_argument("--size", type=int, default=21, help="Grid side (forced odd)")
    parser.add_argument("--algo", type=str, default="prim", choices=["prim", "kruskal"], help="Generation Algorithm")
    parser.add_argument("--loops", type=float, default=0.08, help="Extra loop fraction (0.0 - 1.0)")
    parser.add_argument("--extra-ways", type=int, default=0, help="Walls to open between corridors")
    parser.add_argument("--seed", type=int, default=None, help="Random Seed")

def config_from_args(args):
    from jungle_maze.core.config import MazeConfig
    return MazeConfig(
        size=args.size,
        algo=args.algo,
        loop_fraction=args.loops,
        extra_ways=args.extra_ways,
        solver=getattr(args, "solver", "bfs"),
        delay_ms=getattr(args, "delay", 40),
        seed=args.seed,
    ).normalized()

def open_viewer(session, record=False):
    from jungle_maze.viz.renderer import Renderer
    renderer = Renderer(session, record=record)
    renderer.init_window()
    renderer.run_loop()

def main():
    parser = argparse.ArgumentParser(description="Jungle Maze: weighted maze generator & step-wise solver")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    add_maze_options(gen_parser)
    gen_parser.add_argument("--visual", action="store_true", help="Open the viewer")

    # Solve Command
    solve_parser = subparsers.add_parser("solve", help="Generate a maze and solve it")
    add_maze_options(solve_parser)
    solve_parser.add_argument("--solver", type=str, default="bfs", choices=SOLVER_CHOICES, help="Solver algorithm")
    solve_parser.add_argument("--delay", type=int, default=40, help="Animation delay per step (ms)")
    solve_parser.add_argument("--visual", action="store_true", help="Animate the search in the viewer")
    solve_parser.add_argument("--record", action="store_true", help="Record video of the viewer")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Compare all solvers on generated mazes")
    add_maze_options(bench_parser)
    bench_parser.add_argument("--runs", type=int, default=5, help="Number of mazes")

    args = parser.parse_args()

    setup_logging(args.verbose)
    logger = logging.getLogger("jungle_maze")

    if args.command is None:
        parser.print_help()
        return

    logger.info(f"Running command: {args.command}")
    cfg = config_from_args(args)

    if args.command == "generate":
        from jungle_maze.session import MazeSession
        from jungle_maze.core.complexity import MazePostProcessor

        session = MazeSession(cfg)
        if args.visual:
            logger.info("Visual mode enabled - Opening window...")
            open_viewer(session)
            return

        grid = session.regenerate()
        print(grid.to_text())
        stats = MazePostProcessor.calculate_stats(grid)
        logger.info(f"Stats: {stats}")

    elif args.command == "solve":
        from jungle_maze.session import MazeSession

        session = MazeSession(cfg)
        if args.visual or args.record:
            logger.info("Visual mode enabled - Opening window (S: solve, SPACE: pause, R: reset, G: new maze)")
            open_viewer(session, record=args.record)
            return

        session.regenerate()
        solver = session.start_solve()
        while not session.tick():
            if solver.steps % 1000 == 0:
                print(f"\rVisited: {solver.steps}", end="")
        print(f"\r{session.grid.to_text()}")
        print(session.result_message())

    elif args.command == "benchmark":
        import random
        import time
        from jungle_maze.algo.pipeline import generate
        from jungle_maze.algo.solvers import Solver, SolverType

        logger.info(f"Running Solver Benchmark ({args.runs} mazes, {cfg.size}x{cfg.size}, {cfg.algo})...")
        rng = random.Random(cfg.seed)
        totals = {t: [0, 0, 0, 0.0] for t in SolverType} # steps, path, weight, time

        for _ in range(max(args.runs, 1)):
            grid = generate(cfg, rng=rng)
            for strategy in SolverType:
                grid.clear_marks()
                solver = Solver(grid, strategy)
                t0 = time.time()
                solver.run_all()
                acc = totals[strategy]
                acc[0] += solver.steps
                acc[1] += solver.shortest_path_steps
                acc[2] += solver.total_weight
                acc[3] += time.time() - t0

        runs = max(args.runs, 1)
        print(f"\n{'ALGORITHM':<10} | {'STEPS':<8} | {'PATH':<8} | {'WEIGHT':<8} | {'TIME (s)':<10}")
        print("-" * 56)
        for strategy, (steps, path, wt, secs) in totals.items():
            print(f"{strategy.label:<10} | {steps / runs:<8.1f} | {path / runs:<8.1f} | {wt / runs:<8.1f} | {secs / runs:<10.4f}")

if __name__ == "__main__":
    main()
