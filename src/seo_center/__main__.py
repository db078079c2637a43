"""Run the API server: ``python -m src.seo_center``."""

import argparse
import asyncio

import uvicorn

from src.seo_center.core.config import get_settings
from src.seo_center.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="SEO Command Center API server")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    return parser.parse_args()


async def main() -> None:
    args = parse_args()
    settings = get_settings()
    setup_logging(settings.debug)

    config = uvicorn.Config(
        "src.seo_center.main:app",
        host=args.host,
        port=args.port,
        log_level="debug" if settings.debug else "info",
    )
    server = uvicorn.Server(config)
    logger.info(f"Starting {settings.app_name} on {args.host}:{args.port}")
    await server.serve()


if __name__ == "__main__":
    asyncio.run(main())
