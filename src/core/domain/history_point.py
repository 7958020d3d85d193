from dataclasses import dataclass
from datetime import datetime

from core.domain.host_state import HostState
from core.domain.verdict import Verdict


@dataclass(frozen=True)
class HistoryPoint:
    timestamp: datetime
    state: HostState
    response_time_ms: int

    @classmethod
    def from_verdict(cls, verdict: Verdict) -> "HistoryPoint":
        return cls(
            timestamp=verdict.checked_at,
            state=verdict.state,
            response_time_ms=verdict.response_time_ms,
        )
