"""Command-line entrypoint for running the inventory server.

Usage:
- python -m inventory_app.main -h 127.0.0.1 -p 3000 -c ./cache
- inventory-server --host 0.0.0.0 --port 8080 --cache /var/lib/inventory

Each option falls back to its INVENTORY_* environment variable; the
server refuses to start when any of the three is still missing.
"""

from __future__ import annotations

import argparse
import logging
import os
from typing import List, Optional

from inventory_app import create_app
from inventory_app.config import Config

logger = logging.getLogger("inventory_app")


def build_parser() -> argparse.ArgumentParser:
    # -h is the host flag, so help moves to --help only
    parser = argparse.ArgumentParser(description="Inventory registration service", add_help=False)
    parser.add_argument("--help", action="help", help="show this help message and exit")
    parser.add_argument("-h", "--host", default=Config.HOST, help="server address")
    parser.add_argument("-p", "--port", type=int, default=Config.PORT, help="server port")
    parser.add_argument("-c", "--cache", default=Config.CACHE_DIR, help="path to the cache directory")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    missing = [f"--{name}" for name in ("host", "port", "cache") if getattr(args, name) in (None, "")]
    if missing:
        parser.error(f"the following arguments are required: {', '.join(missing)}")
    args.cache = os.path.abspath(args.cache)
    return args


def main(argv: Optional[List[str]] = None) -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    args = parse_args(argv)
    logger.info("Options: host=%s port=%s cache=%s", args.host, args.port, args.cache)

    app = create_app(args.cache)
    logger.info("Server running at http://%s:%s", args.host, args.port)
    app.run(host=args.host, port=args.port, threaded=True)


if __name__ == "__main__":
    main()
