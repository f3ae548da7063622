import argparse
import os

from environs import Env

from link_planner.adapter import LinkPlannerAPI
from link_planner.application.interaction import LinkCreationOutcome
from link_planner.application.services.coordinate_parser import CoordinateParser
from link_planner.domain.constants import OUTPUT_DATA_DIR
from link_planner.domain.exceptions import PlannerException
from link_planner.infrastructure.output.formatters import (
    ConsoleOutputFormatter,
    JSONOutputFormatter,
)
from link_planner.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Plan radio links and render the first Fresnel zone"
    )
    parser.add_argument(
        "--tower",
        action="append",
        default=[],
        metavar="POSITION",
        help=(
            'Tower position, e.g. "13.027 77.545" or "13.027N 77.545E". '
            "Repeatable; several positions may be separated by semicolons."
        ),
    )
    parser.add_argument(
        "--frequency",
        type=float,
        default=None,
        help="Frequency of every placed tower in GHz (default from environment)",
    )
    parser.add_argument(
        "--select",
        type=int,
        default=1,
        help="1-based index of the link to select (default: first)",
    )
    parser.add_argument(
        "--zoom", type=float, default=None, help="Zoom level applied after selection"
    )
    parser.add_argument(
        "--pan",
        type=float,
        nargs=2,
        default=None,
        metavar=("DX", "DY"),
        help="Pan by a pixel offset after selection",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the summary as JSON"
    )
    parser.add_argument(
        "--plot-name",
        type=str,
        default="fresnel",
        help="File name (without .png) of the saved plot in the output directory",
    )
    return parser


def run_planner(args: argparse.Namespace, planner: LinkPlannerAPI) -> str | None:
    """Places the towers, links consecutive ones and renders the selection."""
    parser = CoordinateParser()
    positions = [coord for text in args.tower for coord in parser.parse_many(text)]
    if len(positions) < 2:
        raise ValueError("At least two --tower positions are required")

    towers = [planner.place_tower(pos, args.frequency) for pos in positions]
    links = []
    for tower_a, tower_b in zip(towers, towers[1:]):
        result = planner.link_towers(tower_a.id, tower_b.id)
        if result.outcome is LinkCreationOutcome.CREATED and result.link:
            links.append(result.link)

    if not links:
        raise ValueError("No links could be created")
    if not 1 <= args.select <= len(links):
        raise ValueError(f"--select must be between 1 and {len(links)}")

    planner.handle_link_click(links[args.select - 1].id)
    if args.zoom is not None:
        planner.zoom(args.zoom)
    if args.pan is not None:
        planner.pan(*args.pan)

    save_path = os.path.join(OUTPUT_DATA_DIR, f"{args.plot_name}.png")
    planner.save_plot(save_path)

    formatter = JSONOutputFormatter() if args.json else ConsoleOutputFormatter()
    output = formatter.format_result(
        planner.state,
        planner.selected_link,
        planner.controller.link_geometry,
        planner.controller.ellipse_geometry,
    )
    if args.json:
        print(output)
    print(f"✅ Plot saved to {save_path}")
    return output


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # Load environment variables as early as possible within main()
    env = Env()
    env.read_env(".env")

    # Setup logging ONLY AFTER environment variables are loaded, passing env
    setup_logging(env)

    planner = None
    try:
        planner = LinkPlannerAPI.create_from_env(env)
        run_planner(args, planner)
    except (PlannerException, ValueError) as e:
        print(f"Error: {e}")
        return 1
    finally:
        if planner is not None:
            planner.close()
    return 0


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
