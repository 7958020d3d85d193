import asyncio
from functools import lru_cache
from pathlib import Path

from core.domain.snapshot import Snapshot
from core.port.snapshot_repository import SnapshotRepository
from infra.artifacts.schemas import StatusArtifactDTO
from infra.config.config import get_config
from infra.utils.atomic_write import write_text_atomically


class JsonSnapshotRepository(SnapshotRepository):
    def __init__(self, path: Path) -> None:
        self.path = path

    async def save(self, snapshot: Snapshot) -> None:
        content = StatusArtifactDTO.from_domain(snapshot).model_dump_json(by_alias=True, indent=2)

        await asyncio.to_thread(write_text_atomically, self.path, content + "\n")


@lru_cache
def get_snapshot_repository() -> SnapshotRepository:
    return JsonSnapshotRepository(Path(get_config().ARTIFACTS_CONFIG.STATUS_PATH))
