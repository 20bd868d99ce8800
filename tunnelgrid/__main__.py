"""Entry point for ``python -m tunnelgrid``.

Loads the default YAML config, generates a session, and either prints a
text dump of the grid or opens a Pygame window to dig through it.
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys

from tunnelgrid.errors import TunnelgridError
from tunnelgrid.setup_logging import setup_logging
from tunnelgrid.simulation.config import GenerationParameters
from tunnelgrid.simulation.session import Session
from tunnelgrid.terrain.grid import format_grid

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Return the command line parser."""
    parser = argparse.ArgumentParser(
        prog="tunnelgrid",
        description="tunnelgrid - procedural terrain you can dig through",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--dump",
        type=int,
        nargs="?",
        const=30,
        default=None,
        metavar="N",
        help="Print the top-left NxN block of the grid and exit (default N: 30)",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=6,
        help="Pixel size per grid cell (default: 6)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=60,
        help="Target frames per second (default: 60)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for tunnelgrid messages (default: INFO)",
    )
    parser.add_argument(
        "--log-file",
        type=pathlib.Path,
        default=None,
        help="Also write log messages to this file",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse CLI args, build the session, dump or launch the renderer."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        params = GenerationParameters.from_yaml(args.config)
        session = Session(params=params)
    except TunnelgridError as exc:
        logger.error("Invalid configuration in %s: %s", args.config, exc)
        return 2

    if args.dump is not None:
        print(format_grid(session.grid, width=args.dump, height=args.dump))
        return 0

    from tunnelgrid.ui.pygame_client import PygameRenderer

    renderer = PygameRenderer(session=session, cell_size=args.cell_size)
    renderer.run(fps=args.fps)
    return 0


if __name__ == "__main__":
    sys.exit(main())
