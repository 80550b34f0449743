"""Entry point for huck package."""

import argparse
import logging
import sys


def _demo_state():
    from huck.core import Disc, FieldDimensions, GameState, Player

    players = [
        Player("offense_1", 1, 80.0, 15.0, has_disc=True),
        Player("mark_1", 2, 79.0, 16.0, is_defender=True, is_mark=True),
        Player("offense_2", 1, 55.0, 15.0, label="1"),
        Player("defender_2", 2, 55.0, 14.0, is_defender=True, label="1"),
    ]
    return GameState(
        players=players,
        disc=Disc(80.0, 15.0, holder_id="offense_1"),
        field=FieldDimensions.standard(),
    )


def run_demo(grid_size: float) -> None:
    """Print heat-map figures and suggested positions for a sample state."""
    from huck.heatmap import HeatMapModes, calculate_heat_map, combined_heat_map_sum
    from huck.positioning import (
        position_defender_optimal,
        position_offender_optimal,
        position_offender_stack,
    )

    state = _demo_state()
    print("Huck - Ultimate Tactics (Demo Mode)")
    print("=" * 50)

    heat_map = calculate_heat_map(state, HeatMapModes.all_enabled(), True, grid_size)
    if heat_map is not None:
        best = max(
            (v, i, j) for i, column in enumerate(heat_map.values) for j, v in enumerate(column)
        )
        print(f"Mode: {heat_map.mode}, cells: {len(heat_map.values)} x {len(heat_map.values[0])}")
        print(f"Hottest cell: ({best[1]}, {best[2]})")
    # demo state always has a thrower, so the sum is never None

    print(f"Combined sum: {combined_heat_map_sum(state, grid_size):.2f}")
    print(f"Defender '1' -> {position_defender_optimal(state.copy(), grid_size, '1')}")
    print(f"Offender '1' -> {position_offender_optimal(state.copy(), grid_size, '1')}")
    print(f"Stack       -> {position_offender_stack(state.copy())}")


def main() -> None:
    """Main entry point for the Huck backend."""
    from huck.config import get_config

    config = get_config()

    parser = argparse.ArgumentParser(
        description="Huck - Ultimate tactics heat-map backend",
        prog="huck",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Print heat-map results for a sample state (no server)",
    )
    parser.add_argument(
        "--host",
        type=str,
        default=config.host,
        help=f"Bind host (default: {config.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=config.port,
        help=f"Bind port (default: {config.port})",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Reload the server on code changes",
    )

    args = parser.parse_args()

    errors = config.validate()
    if errors:
        for error in errors:
            print(f"config error: {error}", file=sys.stderr)
        sys.exit(2)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.demo:
        run_demo(config.default_grid_size)
    else:
        from huck.api.main import run_api

        run_api(host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
