from core.domain.history_summary import HistorySummary
from infra.artifacts.schemas import CamelModel


class HistorySummaryResponseDTO(CamelModel):
    name: str
    total_checks: int
    online_checks: int
    uptime: float
    avg_response_time: int
    max_response_time: int

    @classmethod
    def from_domain(cls, summary: HistorySummary) -> "HistorySummaryResponseDTO":
        return cls(
            name=summary.host_name,
            total_checks=summary.total_checks,
            online_checks=summary.online_checks,
            uptime=summary.uptime,
            avg_response_time=summary.avg_response_time,
            max_response_time=summary.max_response_time,
        )
