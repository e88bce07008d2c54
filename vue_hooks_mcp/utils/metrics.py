"""
In-process metrics for tool calls and upstream fetches
"""

import threading
import time
from collections import defaultdict, deque
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Deque, Dict, Optional

from vue_hooks_mcp.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class MetricValue:
    """Individual metric value with timestamp"""

    value: float
    timestamp: datetime
    tags: Dict[str, str] = field(default_factory=dict)


@dataclass
class PerformanceMetrics:
    """Timing of a single operation"""

    operation_name: str
    duration: float
    success: bool
    error_message: Optional[str] = None
    timestamp: datetime = field(default_factory=datetime.now)
    tags: Dict[str, str] = field(default_factory=dict)


class MetricsCollector:
    """Collects counters and timings, keeping the most recent values per name"""

    def __init__(self, max_metrics_per_type: int = 1000):
        self.max_metrics_per_type = max_metrics_per_type
        self.metrics: Dict[str, Deque[MetricValue]] = defaultdict(
            lambda: deque(maxlen=max_metrics_per_type)
        )
        self.performance_metrics: Deque[PerformanceMetrics] = deque(
            maxlen=max_metrics_per_type
        )
        self._lock = threading.Lock()

    def record_metric(
        self, name: str, value: float, tags: Optional[Dict[str, str]] = None
    ):
        """Record a metric value"""
        with self._lock:
            metric = MetricValue(value=value, timestamp=datetime.now(), tags=tags or {})
            self.metrics[name].append(metric)
        logger.debug(f"Recorded metric {name}: {value}")

    def record_performance(
        self,
        operation: str,
        duration: float,
        success: bool,
        error: Optional[str] = None,
        tags: Optional[Dict[str, str]] = None,
    ):
        """Record how long an operation took and whether it succeeded"""
        with self._lock:
            self.performance_metrics.append(
                PerformanceMetrics(
                    operation_name=operation,
                    duration=duration,
                    success=success,
                    error_message=error,
                    tags=tags or {},
                )
            )
        logger.debug(
            f"Recorded performance for {operation}: {duration:.3f}s, success: {success}"
        )

    def get_metrics_summary(
        self, metric_name: str, window_minutes: int = 60
    ) -> Dict[str, Any]:
        """Get summary statistics for a metric within a time window"""
        with self._lock:
            cutoff_time = datetime.now() - timedelta(minutes=window_minutes)

            if metric_name not in self.metrics:
                return {"count": 0, "window_minutes": window_minutes}

            values = [
                m.value for m in self.metrics[metric_name] if m.timestamp >= cutoff_time
            ]

            if not values:
                return {"count": 0, "window_minutes": window_minutes}

            return {
                "count": len(values),
                "total": sum(values),
                "min": min(values),
                "max": max(values),
                "window_minutes": window_minutes,
                "latest": values[-1],
            }

    def get_performance_summary(
        self, operation: Optional[str] = None, window_minutes: int = 60
    ) -> Dict[str, Any]:
        """Get timing summary, optionally for a single operation"""
        with self._lock:
            cutoff_time = datetime.now() - timedelta(minutes=window_minutes)

            recent = [m for m in self.performance_metrics if m.timestamp >= cutoff_time]
            if operation:
                recent = [m for m in recent if m.operation_name == operation]

            if not recent:
                return {"count": 0, "window_minutes": window_minutes}

            durations = [m.duration for m in recent]
            success_count = sum(1 for m in recent if m.success)

            return {
                "count": len(recent),
                "success_rate": success_count / len(recent),
                "avg_duration": sum(durations) / len(durations),
                "max_duration": max(durations),
                "window_minutes": window_minutes,
                "operation": operation,
            }

    def reset(self):
        """Drop every recorded value"""
        with self._lock:
            self.metrics.clear()
            self.performance_metrics.clear()


class PerformanceTimer:
    """Context manager for timing operations"""

    def __init__(
        self,
        metrics_collector: MetricsCollector,
        operation_name: str,
        tags: Optional[Dict[str, str]] = None,
    ):
        self.metrics_collector = metrics_collector
        self.operation_name = operation_name
        self.tags = tags or {}
        self.start_time = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = time.perf_counter() - self.start_time
        self.metrics_collector.record_performance(
            self.operation_name,
            duration,
            exc_type is None,
            str(exc_val) if exc_val is not None else None,
            self.tags,
        )
        return False


# Global metrics collector instance
_metrics_collector = MetricsCollector()


def get_metrics_collector() -> MetricsCollector:
    """Get the global metrics collector"""
    return _metrics_collector


def record_metric(name: str, value: float, tags: Optional[Dict[str, str]] = None):
    """Convenience function to record a metric"""
    _metrics_collector.record_metric(name, value, tags)


def time_operation(operation_name: str, tags: Optional[Dict[str, str]] = None):
    """Context manager timing the enclosed block"""
    return PerformanceTimer(_metrics_collector, operation_name, tags)
