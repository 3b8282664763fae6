"""
Контекст‑менеджер профайлинга – измеряет время разбора файла.
"""

import time
from objtri.utils.logger import logger


class Profiler:
    """Контекст‑менеджер для измерения времени выполнения."""
    def __init__(self, name: str):
        self.name = name
        self.elapsed_ms = 0.0
        self._start = 0.0

    def __enter__(self):
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000.0
        status = "failed" if exc_type is not None else "done"
        logger.debug(f"[Profiler] {self.name} {status}: {self.elapsed_ms:.2f} ms")
