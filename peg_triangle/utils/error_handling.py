"""
utils/error_handling.py

Иерархия ошибок доски и декоратор для их обработки на границе CLI.
"""

from typing import Callable, Any
from functools import wraps

from .logging import get_logger


class PegBoardError(Exception):
    """Базовое исключение доски и решателей."""
    pass


class InvalidJumpError(PegBoardError):
    """Прыжок не проходит проверку validate_jump."""

    def __init__(self, jump_id: int, land_id: int, reason: str = ""):
        self.jump_id = jump_id
        self.land_id = land_id
        self.reason = reason
        message = f"Invalid jump {jump_id} -> {land_id}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class UnknownSpaceError(PegBoardError, KeyError):
    """Обращение к несуществующей лунке."""

    def __init__(self, space_id: Any):
        self.space_id = space_id
        super().__init__(f"Unknown space id: {space_id!r}")

    def __str__(self) -> str:
        # KeyError по умолчанию оборачивает сообщение в кавычки
        return self.args[0]


class InvariantViolationError(PegBoardError):
    """get_valid_moves() вернул ход, который move() отверг."""
    pass


def handle_errors(default_return: Any = None, log_error: bool = True):
    """
    Декоратор: превращает PegBoardError в запись лога и default_return.

    Прочие исключения не перехватываются.

    Args:
        default_return: значение по умолчанию при ошибке
        log_error: логировать ли ошибку
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except PegBoardError as e:
                if log_error:
                    get_logger().error(f"{func.__name__}: {e}")
                return default_return
        return wrapper
    return decorator
