"""
Performance monitoring utilities.

Tracks how long remote service calls and UI flows take, and warns about
slow ones.
"""

import time
import functools
from typing import Callable, Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)

# Operations slower than this (seconds) are logged as warnings
SLOW_OPERATION_THRESHOLD = 1.0


class PerformanceMonitor:
    """
    Collects operation durations keyed by operation name.
    """
    
    def __init__(self):
        """Initialize performance monitor."""
        self.metrics: Dict[str, list] = {}
    
    def record(self, operation: str, duration: float):
        """
        Record an operation duration.
        
        Args:
            operation: Name of the operation
            duration: Duration in seconds
        """
        self.metrics.setdefault(operation, []).append(duration)
    
    def get_stats(self, operation: str) -> Dict[str, float]:
        """
        Get statistics for an operation.
        
        Args:
            operation: Name of the operation
        
        Returns:
            Dictionary with min, max, avg, total, count
        """
        durations = self.metrics.get(operation)
        if not durations:
            return {
                'min': 0,
                'max': 0,
                'avg': 0,
                'total': 0,
                'count': 0
            }
        
        return {
            'min': min(durations),
            'max': max(durations),
            'avg': sum(durations) / len(durations),
            'total': sum(durations),
            'count': len(durations)
        }
    
    def get_all_stats(self) -> Dict[str, Dict[str, float]]:
        """Statistics for every recorded operation."""
        return {
            operation: self.get_stats(operation)
            for operation in self.metrics.keys()
        }
    
    def clear(self):
        """Clear all recorded metrics."""
        self.metrics.clear()
    
    def log_stats(self, operation: Optional[str] = None):
        """
        Log statistics for one operation, or for all when operation is None.
        """
        operations = [operation] if operation else sorted(self.metrics.keys())
        for op in operations:
            stats = self.get_stats(op)
            logger.info(
                f"{op}: count={stats['count']} avg={stats['avg']:.3f}s "
                f"min={stats['min']:.3f}s max={stats['max']:.3f}s"
            )


# Global performance monitor instance
_global_monitor = PerformanceMonitor()


def get_monitor() -> PerformanceMonitor:
    """Get the global performance monitor instance."""
    return _global_monitor


def _record(op_name: str, duration: float):
    _global_monitor.record(op_name, duration)
    if duration > SLOW_OPERATION_THRESHOLD:
        logger.warning(
            f"Operation '{op_name}' took {duration:.2f}s "
            f"(threshold: {SLOW_OPERATION_THRESHOLD}s)"
        )


def monitor_performance(operation_name: Optional[str] = None):
    """
    Decorator to monitor function performance.
    
    Args:
        operation_name: Name for the operation (defaults to function name)
    
    Example:
        @monitor_performance("list_entries")
        def list_entries(self):
            ...
    """
    def decorator(func: Callable) -> Callable:
        op_name = operation_name or func.__name__
        
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            start_time = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                _record(op_name, time.perf_counter() - start_time)
        
        return wrapper
    return decorator


class measure_time:
    """
    Context manager for measuring a block of work.
    
    Example:
        with measure_time("submit_cycle"):
            store.submit(draft)
    """
    
    def __init__(self, operation_name: str):
        self.name = operation_name
        self.start_time = None
    
    def __enter__(self):
        self.start_time = time.perf_counter()
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb):
        _record(self.name, time.perf_counter() - self.start_time)
