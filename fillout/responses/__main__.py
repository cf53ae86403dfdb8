"""Run the filtered responses service.

Usage:
    FILLOUT_SK=... python -m fillout.responses [--host HOST] [--port PORT]
"""

from __future__ import annotations

import argparse
import logging
import sys

from aiohttp import web

from .config import Settings
from .core.exceptions import ConfigurationError
from .server import create_app

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Filtered Fillout form responses service")
    parser.add_argument("--host", default=None, help="Bind address (overrides HOST)")
    parser.add_argument("--port", type=int, default=None, help="Bind port (overrides PORT)")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        logger.error(str(e))
        return 1

    overrides = {}
    if args.host is not None:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if overrides:
        settings = settings.model_copy(update=overrides)

    logger.info("[server]: Server is running at http://%s:%s", settings.host, settings.port)
    web.run_app(create_app(settings), host=settings.host, port=settings.port, print=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
