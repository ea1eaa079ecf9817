# Area: Shared
"""
hotseat_show.cli — Command-line interface
==========================================

Provides CLI entry point for running a local show.

Usage:
    python -m hotseat_show --demo                    # Run with demo players
    python -m hotseat_show --config config.json      # Run with config file

Demo mode can be enabled via:
    1. CLI flag: --demo
    2. Environment variable: DEMO_MODE=true
"""

import argparse
import os
import sys
from typing import Any, Dict

from ._runner_config import load_config, validate_config


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Hot Seat Show - run a local trivia show",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  hotseat-show --demo
  hotseat-show --demo --host --rounds 2
  hotseat-show --demo --config config.json --time-scale 0.2
  DEMO_MODE=true hotseat-show --config config.json
        """,
    )

    parser.add_argument(
        "--demo",
        action="store_true",
        help="Play the show with scripted demo participants",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )
    parser.add_argument(
        "--contestants",
        type=int,
        help="Number of demo contestants",
    )
    parser.add_argument(
        "--host",
        action="store_true",
        help="Seat a demo show host instead of letting timers run the show",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        help="Stop after this many rounds",
    )
    parser.add_argument(
        "--time-scale",
        type=float,
        help="Multiply every automatic wait (0.1 = ten times faster)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible shows",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show standard logs instead of the phase log",
    )

    return parser.parse_args(argv)


def apply_overrides(config: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    """Layer command line flags over the loaded configuration."""
    overrides = {
        "demo_contestants": args.contestants,
        "max_rounds": args.rounds,
        "time_scale": args.time_scale,
        "random_seed": args.seed,
    }
    config.update({key: value for key, value in overrides.items() if value is not None})
    if args.host:
        config["demo_show_host"] = True
    if args.verbose:
        config["phase_mode"] = False
    return config


def is_demo_mode(args: argparse.Namespace) -> bool:
    """Check if demo mode is enabled via CLI or environment."""
    if args.demo:
        return True
    return os.environ.get("DEMO_MODE", "").lower() in ("true", "1", "yes")


def main(argv=None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    try:
        config = load_config(args.config)
        config = validate_config(apply_overrides(config.model_dump(), args))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not is_demo_mode(args):
        # Networked play needs a transport; the CLI can only run demo players
        print("Error: The command line only runs local demo shows.", file=sys.stderr)
        print("Use --demo, or embed GameServer behind your own transport.", file=sys.stderr)
        return 1

    from .runner import ShowRunner
    runner = ShowRunner(config=config)
    runner.add_demo_players()
    runner.run()
    return 0
