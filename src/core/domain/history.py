"""Rolling per-host history of verdicts.

A history maps a host name to its points, oldest first. Every series is a
sliding window: once it holds more than ``retention_limit`` points the oldest
ones are dropped.
"""

from core.domain.history_point import HistoryPoint
from core.domain.snapshot import Snapshot

History = dict[str, list[HistoryPoint]]


def merge_snapshot(history: History, snapshot: Snapshot, retention_limit: int) -> History:
    if retention_limit < 1:
        raise ValueError(f"retention_limit must be at least 1: {retention_limit}")

    merged: History = {host_name: list(points) for host_name, points in history.items()}

    for verdict in snapshot:
        series = merged.setdefault(verdict.host_name, [])
        series.append(HistoryPoint.from_verdict(verdict))

        if len(series) > retention_limit:
            merged[verdict.host_name] = series[-retention_limit:]

    return merged
