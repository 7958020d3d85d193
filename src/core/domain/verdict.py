from dataclasses import dataclass
from datetime import datetime

from core.domain.host_state import HostState


@dataclass(frozen=True)
class Verdict:
    host_name: str
    state: HostState
    response_time_ms: int
    checked_at: datetime

    @classmethod
    def online(cls, host_name: str, response_time_ms: int, checked_at: datetime) -> "Verdict":
        return cls(host_name, HostState.ONLINE, response_time_ms, checked_at)

    @classmethod
    def offline(cls, host_name: str, checked_at: datetime) -> "Verdict":
        return cls(host_name, HostState.OFFLINE, 0, checked_at)

    @property
    def is_online(self) -> bool:
        return self.state is HostState.ONLINE
