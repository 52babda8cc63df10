"""Настройка логгера doorsim и печать поз деталей."""
from __future__ import annotations
from typing import Optional
import logging
import sys
from spatialmath import SE3

from .transforms import safe_uq_from_R

LOGGER_NAME = "doorsim"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Настроить логгер 'doorsim': stdout и, опционально, файл.
    Повторный вызов заменяет обработчики (без дублей строк).
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if logger.hasHandlers():
        logger.handlers.clear()

    fmt = logging.Formatter('%(asctime)s %(levelname)s %(name)s: %(message)s', datefmt='%H:%M:%S')

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(fmt)
    logger.addHandler(console)

    if log_file:
        fh = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        fh.setLevel(level)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger


def format_pose(T: SE3) -> str:
    p = T.t
    q = safe_uq_from_R(T.R).vec
    return (f"pos [{p[0]:.3f} {p[1]:.3f} {p[2]:.3f}] "
            f"quat [{q[0]:.4f} {q[1]:.4f} {q[2]:.4f} {q[3]:.4f}]")


def log_pose(tag: str, T: SE3, level: int = logging.INFO):
    """Поза SE3 в формате pos[...] quat[wxyz]."""
    logging.getLogger(LOGGER_NAME).log(level, "%s: %s", tag, format_pose(T))
