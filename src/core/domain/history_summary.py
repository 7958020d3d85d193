from dataclasses import dataclass

from core.domain.history_point import HistoryPoint
from core.domain.host_state import HostState


@dataclass(frozen=True)
class HistorySummary:
    host_name: str
    total_checks: int
    online_checks: int
    uptime: float
    avg_response_time: int
    max_response_time: int

    @classmethod
    def from_points(cls, host_name: str, points: list[HistoryPoint]) -> "HistorySummary":
        online_points = [point for point in points if point.state is HostState.ONLINE]
        total_checks = len(points)
        online_checks = len(online_points)

        uptime = round((online_checks / total_checks) * 100, 2) if total_checks else 0.0

        if not online_points:
            return cls(host_name, total_checks, online_checks, uptime, 0, 0)

        response_times = [point.response_time_ms for point in online_points]

        return cls(
            host_name=host_name,
            total_checks=total_checks,
            online_checks=online_checks,
            uptime=uptime,
            avg_response_time=round(sum(response_times) / online_checks),
            max_response_time=max(response_times),
        )
