from __future__ import annotations
import logging

def get_logger(name: str, level: str | int | None = None) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(logging.INFO)
        ch = logging.StreamHandler()
        fmt = logging.Formatter('[%(levelname)s] %(message)s')
        ch.setFormatter(fmt)
        logger.addHandler(ch)
    if level is not None:
        logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger


def set_level(level: str | int) -> None:
    """Apply one level to every logger already created through get_logger."""
    for name, obj in list(logging.root.manager.loggerDict.items()):
        # Skip placeholders for dotted parents
        if not isinstance(obj, logging.Logger) or not obj.handlers:
            continue
        if name in {"main", "__main__"} or name.startswith("flightcsv"):
            get_logger(name, level)
