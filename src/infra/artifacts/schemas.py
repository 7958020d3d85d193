from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, RootModel
from pydantic.alias_generators import to_camel

from core.domain.history import History
from core.domain.history_point import HistoryPoint
from core.domain.host import Host
from core.domain.host_state import HostState
from core.domain.snapshot import Snapshot
from core.domain.verdict import Verdict


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HostRecordDTO(CamelModel):
    name: str = Field(min_length=1)
    ip: str = Field(min_length=1)
    port: int = Field(default=22, ge=1, le=65535)

    def to_domain(self) -> Host:
        return Host(name=self.name, address=self.ip, port=self.port)


class HostListDTO(RootModel[list[HostRecordDTO]]):
    pass


class ServerStatusDTO(CamelModel):
    name: str
    status: HostState
    response_time: int
    last_checked: datetime

    @classmethod
    def from_domain(cls, verdict: Verdict) -> "ServerStatusDTO":
        return cls(
            name=verdict.host_name,
            status=verdict.state,
            response_time=verdict.response_time_ms,
            last_checked=verdict.checked_at,
        )


class StatusArtifactDTO(CamelModel):
    last_update: datetime
    servers: list[ServerStatusDTO]

    @classmethod
    def from_domain(cls, snapshot: Snapshot) -> "StatusArtifactDTO":
        return cls(
            last_update=snapshot.last_update,
            servers=[ServerStatusDTO.from_domain(verdict) for verdict in snapshot],
        )


class HistoryPointDTO(CamelModel):
    timestamp: datetime
    status: HostState
    response_time: int

    @classmethod
    def from_domain(cls, point: HistoryPoint) -> "HistoryPointDTO":
        return cls(timestamp=point.timestamp, status=point.state, response_time=point.response_time_ms)

    def to_domain(self) -> HistoryPoint:
        return HistoryPoint(timestamp=self.timestamp, state=self.status, response_time_ms=self.response_time)


class HistoryArtifactDTO(RootModel[dict[str, list[HistoryPointDTO]]]):
    @classmethod
    def from_domain(cls, history: History) -> "HistoryArtifactDTO":
        return cls(
            {host_name: [HistoryPointDTO.from_domain(point) for point in points] for host_name, points in history.items()}
        )

    def to_domain(self) -> History:
        return {host_name: [point.to_domain() for point in points] for host_name, points in self.root.items()}
