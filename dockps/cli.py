"""
Lists the running containers of the local Docker daemon as a table.
Run with: python -m dockps [--no-truncate]
"""
import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from dockps.config import Config
from dockps.docker_client import DaemonClientError, fetch_containers
from dockps.formatter import get_display_rows
from dockps.models import DisplayRow
from dockps.outputs.table import render_container_table


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="dockps", description="List running Docker containers")
    parser.add_argument("-n", "--no-truncate", action="store_true", help="Do not truncate output")
    parser.add_argument("--env-file", default=None, help="Load environment variables from this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr")
    return parser.parse_args(argv)


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


async def get_containers(config: Config, truncate: bool) -> List[DisplayRow]:
    containers = await fetch_containers(config)
    return get_display_rows(containers, truncate)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)

    config = Config.load_env_from_file(args.env_file)

    try:
        rows = asyncio.run(get_containers(config, truncate=not args.no_truncate))
    except DaemonClientError as e:
        cause = f" ({e.__cause__})" if e.__cause__ else ""
        print(f"{e}{cause}", file=sys.stderr)
        return 1

    render_container_table(rows)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
