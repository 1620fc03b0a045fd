from __future__ import annotations

import logging
from typing import List

logger = logging.getLogger(__name__)


class Journal:
    """
    Log lines of a single pipeline run.

    Every line is kept in memory (for the result and for tests) and also
    forwarded to ``logging``. Each run gets its own journal, so concurrent
    runs never interleave inside one list.
    """

    def __init__(self, order_id: str) -> None:
        self.order_id = order_id
        self.lines: List[str] = []

    def log(self, message: str) -> None:
        line = f"[order={self.order_id}] {message}"
        self.lines.append(line)
        logger.info(line)

    def debug(self, message: str) -> None:
        logger.debug(f"[order={self.order_id}] {message}")
