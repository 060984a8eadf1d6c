"""Timing of encode steps."""

import time
from collections.abc import Callable
from functools import wraps
from pathlib import Path
from typing import ParamSpec, TypeVar

from loguru import logger

P = ParamSpec("P")
R = TypeVar("R")


def timed(func: Callable[P, R]) -> Callable[P, R]:
    """Decorator logging how long an encode call took and what it wrote.

    Expects the wrapped function to take `output_path` as a keyword. On
    success the size of the written file is logged with the elapsed time;
    on failure only the elapsed time is. Both go out at DEBUG level.

    Usage:
        @timed
        def image_variant(*, input_path, output_path, ...):
            ...
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        target = kwargs.get("output_path")
        name = Path(str(target)).name if target is not None else "?"
        start_time = time.perf_counter()

        try:
            result = func(*args, **kwargs)
        except Exception:
            elapsed = time.perf_counter() - start_time
            logger.debug(f"[PROFILE] {func.__qualname__} {name} failed after {elapsed:.3f}s")
            raise

        elapsed = time.perf_counter() - start_time
        output = Path(str(target)) if target is not None else None
        written = output.stat().st_size if output is not None and output.is_file() else 0
        logger.debug(f"[PROFILE] {func.__qualname__} {name} {written} bytes in {elapsed:.3f}s")
        return result

    return wrapper
