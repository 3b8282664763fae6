# objtri/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер пакета.
# ---------------------------------------------------------------

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def init_logger(level: int = logging.INFO) -> logging.Logger:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    return logging.getLogger("objtri")


logger = init_logger()


def set_level(level) -> None:
    """Уровень логгера по имени ('DEBUG') или числу."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            logger.warning(f"[Logger] Unknown log level, keeping {logger.level}")
            return
    logger.setLevel(level)
