# screengrid/server/__main__.py
"""Entry point: python -m screengrid.server"""

from __future__ import annotations

import argparse
import logging

import uvicorn

from .config import settings


def main() -> None:
    parser = argparse.ArgumentParser(description="Screengrid Layout Service")
    parser.add_argument("--host", type=str, default=settings.HOST)
    parser.add_argument("--port", type=int, default=settings.PORT)
    parser.add_argument("--log-level", type=str, default=settings.LOG_LEVEL)
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    from . import create_app

    uvicorn.run(create_app(), host=args.host, port=args.port, log_level=args.log_level.lower())


if __name__ == "__main__":
    main()
