"""
utils/timing.py
---------------
Elapsed-time reporting for the demo queries.
"""

import time
from contextlib import contextmanager
from typing import Iterator

from utils.logger import get_logger

logger = get_logger(__name__)


@contextmanager
def timed(label: str) -> Iterator[None]:
    """Log ``<label> <elapsed seconds>`` when the block exits, even on error."""
    start = time.perf_counter()
    try:
        yield
    finally:
        logger.info(f"{label} {time.perf_counter() - start:.6f}s")
