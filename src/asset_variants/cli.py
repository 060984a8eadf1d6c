"""Command-line entry point. Takes no arguments."""

import asyncio
import os
import sys

from loguru import logger

from .common.config import default_config
from .generator import VariantGenerator
from .utils.markup import completion_message

LOG_LEVEL = os.getenv("ASSET_VARIANTS_LOG_LEVEL", "INFO")


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Replace loguru's default sink with a plain stderr one."""
    logger.remove()
    _ = logger.add(sys.stderr, level=level.upper(), format="{message}")


def main() -> int:
    configure_logging()

    try:
        config = default_config()
        logger.info("AF Theatricals - Image Optimization")
        summary = asyncio.run(VariantGenerator(config).run())
    except Exception as exc:
        logger.exception(f"Error: {exc}")
        return 1

    if summary.skipped:
        logger.warning(f"{len(summary.skipped)} source(s) skipped, see warnings above")

    print()
    print(completion_message(config))
    return 0


if __name__ == "__main__":
    sys.exit(main())
