"""Command-line demo runner for the steering behaviours.

Modes:
- Window mode (default): pygame window drawing agents and debug shapes
- Headless mode: stats only, runs as fast as possible
"""

import argparse
import logging
import sys
from typing import List, Optional

from steering.scenarios import SCENARIOS, build_scenario
from steering.world import SteeringWorld

logger = logging.getLogger(__name__)


def run_headless(scenario: str, max_frames: int, stats_interval: int, seed=None) -> dict:
    """Run a scenario without visualization.

    Args:
        scenario: Name of the scenario to build
        max_frames: Number of frames to simulate
        stats_interval: Log agent positions every N frames
        seed: Optional random seed for deterministic behavior
    """
    world = SteeringWorld(seed=seed)
    build_scenario(scenario, world)
    return world.run_headless(max_frames=max_frames, stats_interval=stats_interval)


def run_window(scenario: str, seed=None, max_frames: Optional[int] = None) -> None:
    """Run a scenario in a pygame window until closed (or max_frames)."""
    import pygame

    from steering.config.display import TARGET_COLOR
    from steering.rendering import DebugRenderer

    world = SteeringWorld(seed=seed)
    targets = build_scenario(scenario, world)
    display = world.config.display

    pygame.init()
    try:
        screen = pygame.display.set_mode((display.screen_width, display.screen_height))
        pygame.display.set_caption(f"Steering demo - {scenario}")
        renderer = DebugRenderer(screen, display)
        clock = pygame.time.Clock()
        target_ids = {target.id for target in targets}

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            real_dt = clock.tick(world.config.frame_rate) / 1000.0
            world.step(real_dt)

            renderer.clear()
            renderer.draw(world.debug_shapes())
            for agent in world.registry:
                if agent.id in target_ids:
                    renderer.draw_agent(agent, TARGET_COLOR)
                else:
                    renderer.draw_agent(agent)
            pygame.display.flip()

            if max_frames is not None and world.frame_count >= max_frames:
                running = False
    finally:
        pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="2D Steering Behaviours Demo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Watch an agent pursue a wandering target
  python -m steering --scenario pursuit

  # Headless run with stats every second
  python -m steering --scenario avoid --headless --max-frames 600 --stats-interval 60

  # Reproducible wander run
  python -m steering --scenario wander --headless --seed 42
        """,
    )

    parser.add_argument(
        "--scenario",
        choices=sorted(SCENARIOS),
        default="seek",
        help="Behaviour scenario to run (default: seek)",
    )

    parser.add_argument(
        "--headless", action="store_true", help="Run in headless mode (no window, stats only)"
    )

    parser.add_argument(
        "--max-frames",
        type=int,
        default=600,
        help="Frames to simulate in headless mode (default: 600)",
    )

    parser.add_argument(
        "--stats-interval",
        type=int,
        default=60,
        help="Print stats every N frames in headless mode (default: 60)",
    )

    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for deterministic behavior (optional)"
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable DEBUG logging"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse command-line arguments and run the appropriate mode."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s:%(name)s:%(message)s",
    )

    if args.headless:
        logger.info("Starting headless simulation...")
        logger.info(
            "Configuration: scenario %s, %d frames, stats every %d frames",
            args.scenario,
            args.max_frames,
            args.stats_interval,
        )
        run_headless(args.scenario, args.max_frames, args.stats_interval, seed=args.seed)
        return 0

    try:
        run_window(args.scenario, seed=args.seed)
    except ImportError as e:
        logger.error("Error: pygame is not available: %s", e)
        logger.error("Install with: pip install pygame, or use --headless")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
