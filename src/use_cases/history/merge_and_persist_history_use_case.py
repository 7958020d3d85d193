import structlog

from core.domain.history import History, merge_snapshot
from core.domain.snapshot import Snapshot
from core.port.history_repository import HistoryRepository

logger = structlog.stdlib.get_logger(__name__)


class MergeAndPersistHistoryUseCase:
    def __init__(self, history_repository: HistoryRepository) -> None:
        self.history_repository = history_repository

    async def execute(self, history: History, snapshot: Snapshot, retention_limit: int) -> History:
        merged = merge_snapshot(history, snapshot, retention_limit)

        await self.history_repository.save(merged)

        logger.debug(f"History persisted for {len(merged)} hosts (retention: {retention_limit} points)")

        return merged
