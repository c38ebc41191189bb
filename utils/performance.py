"""
Performance monitoring utilities.

Tracks how long parsing operations take so that slow imports of very
large pasted text show up in the logs.
"""

import time
import functools
import threading
from typing import Callable, Any, Dict, List, Optional
import logging

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Seconds after which an operation is reported as slow
DEFAULT_SLOW_THRESHOLD = 0.5


class PerformanceMonitor:
    """
    Collects per-operation durations.
    
    Attributes:
        slow_threshold: Duration in seconds above which a warning is logged
        metrics: Mapping of operation name to recorded durations
    """
    
    def __init__(self, slow_threshold: float = DEFAULT_SLOW_THRESHOLD):
        self.slow_threshold = slow_threshold
        self.metrics: Dict[str, List[float]] = {}
        self._lock = threading.Lock()
    
    def record(self, operation: str, duration: float):
        """
        Record an operation duration and warn if it was slow.
        
        Args:
            operation: Name of the operation
            duration: Duration in seconds
        """
        with self._lock:
            self.metrics.setdefault(operation, []).append(duration)
        
        if duration > self.slow_threshold:
            logger.warning(
                f"Operation '{operation}' took {duration:.2f}s "
                f"(threshold: {self.slow_threshold}s)"
            )
    
    def get_stats(self, operation: str) -> Dict[str, float]:
        """
        Get statistics for an operation.
        
        Args:
            operation: Name of the operation
        
        Returns:
            Dictionary with min, max, avg, total, count
        """
        with self._lock:
            durations = list(self.metrics.get(operation, []))
        
        if not durations:
            return {'min': 0, 'max': 0, 'avg': 0, 'total': 0, 'count': 0}
        
        return {
            'min': min(durations),
            'max': max(durations),
            'avg': sum(durations) / len(durations),
            'total': sum(durations),
            'count': len(durations)
        }
    
    def get_all_stats(self) -> Dict[str, Dict[str, float]]:
        """Get statistics for every recorded operation."""
        with self._lock:
            operations = list(self.metrics.keys())
        return {operation: self.get_stats(operation) for operation in operations}
    
    def clear(self):
        """Clear all recorded metrics."""
        with self._lock:
            self.metrics.clear()
    
    def log_stats(self, operation: Optional[str] = None):
        """
        Log statistics, for one operation or for all of them.
        
        Args:
            operation: Specific operation to log, or None for all
        """
        stats_by_op = (
            {operation: self.get_stats(operation)} if operation else self.get_all_stats()
        )
        for op, stats in stats_by_op.items():
            logger.info(
                f"{op}: count={stats['count']} avg={stats['avg']:.4f}s "
                f"max={stats['max']:.4f}s total={stats['total']:.4f}s"
            )


# Global performance monitor instance
_global_monitor = PerformanceMonitor()


def get_monitor() -> PerformanceMonitor:
    """Get the global performance monitor instance."""
    return _global_monitor


def monitor_performance(operation_name: Optional[str] = None):
    """
    Decorator recording the duration of every call in the global monitor.
    
    Args:
        operation_name: Name for the operation (defaults to function name)
    
    Example:
        @monitor_performance("reparse")
        def reparse(self):
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
                _global_monitor.record(op_name, time.perf_counter() - start_time)
        
        return wrapper
    return decorator


class TimeMeasurement:
    """Context manager recording the duration of a block."""
    
    def __init__(self, name: str, monitor: Optional[PerformanceMonitor] = None):
        self.name = name
        self.monitor = monitor or _global_monitor
        self.start_time = None
        self.duration = None
    
    def __enter__(self):
        self.start_time = time.perf_counter()
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.perf_counter() - self.start_time
        self.monitor.record(self.name, self.duration)


def measure_time(operation_name: str) -> TimeMeasurement:
    """
    Context manager for measuring operation time.
    
    Example:
        with measure_time("normalize"):
            lines = normalizer.normalize(text)
    """
    return TimeMeasurement(operation_name)
