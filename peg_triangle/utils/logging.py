"""
utils/logging.py

Логгер доски и решателей.

Невалидные прыжки пишутся как WARNING, рассогласование правил в переборе
как ERROR, ход поиска как INFO (verbose) или DEBUG.
"""

import logging
import sys
from typing import Optional


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


class PegLogger:
    """Обёртка над logging.Logger с консольным handler'ом (один на процесс)."""

    def __init__(self, name: str = "peg_triangle", level: int = logging.INFO):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        if not self.logger.handlers:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            console_handler.setFormatter(_formatter())
            self.logger.addHandler(console_handler)

    def set_level(self, level: int):
        """Меняет уровень логгера и всех его handlers."""
        self.logger.setLevel(level)
        for handler in self.logger.handlers:
            handler.setLevel(level)

    def debug(self, message: str):
        self.logger.debug(message)

    def info(self, message: str):
        self.logger.info(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str, exc_info: bool = False):
        self.logger.error(message, exc_info=exc_info)


_default_logger: Optional[PegLogger] = None


def get_logger() -> PegLogger:
    """Общий логгер пакета (создаётся при первом вызове)."""
    global _default_logger
    if _default_logger is None:
        _default_logger = PegLogger()
    return _default_logger


def setup_file_logging(log_file: str, level: int = logging.INFO) -> logging.Handler:
    """
    Дублирует лог в файл.

    Returns:
        добавленный handler (его можно снять через removeHandler)
    """
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(_formatter())
    get_logger().logger.addHandler(file_handler)
    return file_handler


def configure_logging(verbose: bool = False, log_file: Optional[str] = None) -> int:
    """
    Уровень для CLI: DEBUG при verbose, иначе WARNING (видны отказы прыжков).

    Returns:
        выставленный уровень
    """
    level = logging.DEBUG if verbose else logging.WARNING
    get_logger().set_level(level)
    if log_file:
        setup_file_logging(log_file, level)
    return level
