from datetime import datetime, timezone

import pytest

from core.domain.snapshot import Snapshot
from core.domain.verdict import Verdict
from tests.support.fakes import FakeHistoryRepository, FakeSnapshotRepository
from use_cases.history.merge_and_persist_history_use_case import MergeAndPersistHistoryUseCase
from use_cases.status.publish_status_use_case import PublishStatusUseCase

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_publish_overwrites_snapshot_and_delegates_history() -> None:
    snapshot_repository = FakeSnapshotRepository()
    history_repository = FakeHistoryRepository()
    use_case = PublishStatusUseCase(snapshot_repository, MergeAndPersistHistoryUseCase(history_repository))
    snapshot = Snapshot(last_update=NOW, verdicts=[Verdict.offline("a", NOW)])

    history = await use_case.execute(snapshot, {}, retention_limit=504)

    assert snapshot_repository.snapshots == [snapshot]
    assert history_repository.history == history
    assert len(history["a"]) == 1
