from core.domain.history import History
from core.domain.snapshot import Snapshot
from core.port.snapshot_repository import SnapshotRepository
from use_cases.history.merge_and_persist_history_use_case import MergeAndPersistHistoryUseCase


class PublishStatusUseCase:
    def __init__(
        self,
        snapshot_repository: SnapshotRepository,
        merge_and_persist_history_use_case: MergeAndPersistHistoryUseCase,
    ) -> None:
        self.snapshot_repository = snapshot_repository
        self.merge_and_persist_history_use_case = merge_and_persist_history_use_case

    async def execute(self, snapshot: Snapshot, history: History, retention_limit: int) -> History:
        await self.snapshot_repository.save(snapshot)

        return await self.merge_and_persist_history_use_case.execute(history, snapshot, retention_limit)
