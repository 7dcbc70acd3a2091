"""Cache performance metrics."""

from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass
class CacheMetrics:
    """Rolling hit/miss/error counters for the query executor."""

    hits: int = 0
    misses: int = 0
    errors: int = 0
    total_requests: int = 0
    avg_response_time_ms: float = 0.0

    def record(self, is_hit: bool, response_time_ms: float, is_error: bool = False) -> None:
        """Record one request. Errors are counted instead of hit or miss."""
        if is_error:
            self.errors += 1
        elif is_hit:
            self.hits += 1
        else:
            self.misses += 1

        self.total_requests += 1
        self.avg_response_time_ms = (
            self.avg_response_time_ms * (self.total_requests - 1) + response_time_ms
        ) / self.total_requests

    @property
    def hit_rate(self) -> float:
        """Hits over all requests, 0.0 when nothing was recorded."""
        if self.total_requests == 0:
            return 0.0
        return self.hits / self.total_requests

    def reset(self) -> None:
        """Reset all counters."""
        self.hits = 0
        self.misses = 0
        self.errors = 0
        self.total_requests = 0
        self.avg_response_time_ms = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {**asdict(self), "hit_rate": self.hit_rate}
