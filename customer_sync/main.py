from __future__ import annotations

import argparse
import logging
import os
import sys
import uuid

import uvicorn

from customer_sync.api.http_app import build_app
from customer_sync.logging_setup import configure_logging

DEFAULT_PORT = 8000


class _ArgumentError(Exception):
    pass


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise _ArgumentError(message)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = _ArgumentParser(description="Customers collection stub service")
    parser.add_argument("--host", default=os.getenv("APP_HOST", "127.0.0.1"))
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument(
        "--dry-run-startup",
        action="store_true",
        help="Validate startup and exit",
    )
    return parser.parse_args(argv)


def run(argv: list[str] | None = None) -> int:
    try:
        args = parse_args(argv)
    except _ArgumentError as exc:
        sys.stderr.write(f"ERROR: {exc}\n")
        return 2

    if not 0 < args.port < 65536:
        sys.stderr.write(f"ERROR: port out of range: {args.port}\n")
        return 2

    configure_logging()
    run_id = str(uuid.uuid4())
    logger = logging.getLogger("runtime")
    logger.info("runtime initialized", extra={"service": "api", "run_id": run_id})

    if args.dry_run_startup:
        logger.info("dry-run startup complete", extra={"service": "api", "run_id": run_id})
        return 0

    app = build_app(run_id=run_id)
    uvicorn.run(app, host=args.host, port=args.port, log_level="warning")
    return 0


if __name__ == "__main__":
    raise SystemExit(run())
