from core.domain.history_summary import HistorySummary
from core.port.history_repository import HistoryRepository


class GetHistorySummaryUseCase:
    def __init__(self, history_repository: HistoryRepository) -> None:
        self.history_repository = history_repository

    async def execute(self) -> list[HistorySummary]:
        history = await self.history_repository.load()

        return [HistorySummary.from_points(host_name, points) for host_name, points in history.items()]
