"""
Tests for performance monitoring utilities.

Tests performance tracking, statistics, and monitoring decorators.
"""

import logging
import pytest
from utils.performance import (
    PerformanceMonitor,
    get_monitor,
    monitor_performance,
    measure_time
)
from services import create_session


def test_performance_monitor_record():
    """Test recording performance metrics."""
    monitor = PerformanceMonitor()
    
    monitor.record("test_op", 0.5)
    monitor.record("test_op", 0.3)
    monitor.record("test_op", 0.7)
    
    stats = monitor.get_stats("test_op")
    
    assert stats['count'] == 3
    assert stats['min'] == 0.3
    assert stats['max'] == 0.7
    assert stats['avg'] == pytest.approx(0.5, rel=0.01)
    assert stats['total'] == pytest.approx(1.5, rel=0.01)


def test_performance_monitor_unknown_operation():
    """Test stats of an operation never recorded."""
    assert PerformanceMonitor().get_stats("nothing")['count'] == 0


def test_performance_monitor_clear():
    """Test clearing performance metrics."""
    monitor = PerformanceMonitor()
    
    monitor.record("op1", 0.1)
    monitor.record("op2", 0.2)
    assert len(monitor.get_all_stats()) == 2
    
    monitor.clear()
    assert monitor.get_all_stats() == {}


def test_slow_operation_logged(caplog):
    """Test operations above the threshold produce a warning."""
    monitor = PerformanceMonitor(slow_threshold=0.1)
    
    with caplog.at_level(logging.WARNING, logger="utils.performance"):
        monitor.record("fast", 0.01)
        monitor.record("slow", 0.5)
    
    messages = [record.getMessage() for record in caplog.records]
    assert any("'slow'" in message for message in messages)
    assert not any("'fast'" in message for message in messages)


def test_monitor_performance_decorator():
    """Test the decorator records into the global monitor."""
    get_monitor().clear()
    
    @monitor_performance("decorated_op")
    def work(x):
        return x * 2
    
    assert work(21) == 42
    assert get_monitor().get_stats("decorated_op")['count'] == 1


def test_monitor_performance_records_on_error():
    """Test a failing call is still recorded."""
    get_monitor().clear()
    
    @monitor_performance()
    def failing():
        raise RuntimeError("boom")
    
    with pytest.raises(RuntimeError):
        failing()
    
    assert get_monitor().get_stats("failing")['count'] == 1


def test_measure_time():
    """Test the context manager records a duration."""
    get_monitor().clear()
    
    with measure_time("block") as measurement:
        sum(range(1000))
    
    assert measurement.duration >= 0
    assert get_monitor().get_stats("block")['count'] == 1


def test_session_operations_monitored():
    """Test session creation and reparse are monitored."""
    get_monitor().clear()
    
    session = create_session("apple\tりんご")
    session.reparse()
    
    stats = get_monitor().get_all_stats()
    assert stats['create_session']['count'] == 1
    assert stats['reparse']['count'] == 2
    assert stats['parse']['count'] == 2
