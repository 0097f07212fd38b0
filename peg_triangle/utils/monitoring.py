"""
utils/monitoring.py

Сводка по запускам решателей: время, узлы, тупиковые партии.
"""

import time
from collections import defaultdict
from functools import wraps
from typing import Any, Dict, List, Optional

from .logging import get_logger


class PerformanceMonitor:
    """
    Копит запуски по имени операции.

    Каждый запуск - время и произвольные счётчики (nodes, lines, ...),
    счётчики одной операции суммируются.
    """

    def __init__(self):
        self.times: Dict[str, List[float]] = defaultdict(list)
        self.counters: Dict[str, Dict[str, int]] = defaultdict(lambda: defaultdict(int))

    def record_run(self, operation: str, elapsed: float, **counts: int):
        """
        Args:
            operation: имя операции ('permutation_search', ...)
            elapsed: время в секундах
            counts: счётчики запуска, например nodes=..., lines=...
        """
        self.times[operation].append(elapsed)
        for name, value in counts.items():
            self.counters[operation][name] += value

        details = ", ".join(f"{name}={value}" for name, value in counts.items())
        get_logger().debug(f"{operation}: {elapsed:.3f}s {details}".rstrip())

    def get_stats(self, operation: str) -> Dict[str, Any]:
        """Сводка по операции; {} если запусков не было."""
        times = self.times.get(operation)
        if not times:
            return {}

        stats: Dict[str, Any] = {
            'runs': len(times),
            'total': sum(times),
            'average': sum(times) / len(times),
        }
        stats.update(self.counters[operation])
        return stats

    def operations(self) -> List[str]:
        return sorted(self.times)

    def print_stats(self):
        print("\nStatistics:")
        for operation in self.operations():
            stats = self.get_stats(operation)
            line = f"  {operation}: {stats['runs']} runs, average {stats['average']:.3f}s"
            extra = [f"{name} {value}" for name, value in stats.items()
                     if name not in ('runs', 'total', 'average')]
            if extra:
                line += ", " + ", ".join(extra)
            print(line)

    def reset(self):
        self.times.clear()
        self.counters.clear()


_monitor: Optional[PerformanceMonitor] = None


def get_monitor() -> PerformanceMonitor:
    """Общий монитор процесса."""
    global _monitor
    if _monitor is None:
        _monitor = PerformanceMonitor()
    return _monitor


def monitor_time(operation: str):
    """
    Записывает время вызова как запуск operation (или operation_error).

    Usage:
        @monitor_time('greedy_game')
        def play(...):
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.time()
            try:
                result = func(*args, **kwargs)
            except Exception:
                get_monitor().record_run(f"{operation}_error", time.time() - start)
                raise
            get_monitor().record_run(operation, time.time() - start)
            return result
        return wrapper
    return decorator
