"""
utils - Логирование, ошибки и мониторинг.
"""

from .logging import PegLogger, get_logger, setup_file_logging, configure_logging
from .error_handling import (
    PegBoardError, InvalidJumpError, UnknownSpaceError,
    InvariantViolationError, handle_errors
)
from .monitoring import PerformanceMonitor, get_monitor, monitor_time

__all__ = [
    'PegLogger', 'get_logger', 'setup_file_logging', 'configure_logging',
    'PegBoardError', 'InvalidJumpError', 'UnknownSpaceError',
    'InvariantViolationError', 'handle_errors',
    'PerformanceMonitor', 'get_monitor', 'monitor_time',
]
