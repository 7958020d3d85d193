from abc import ABC, abstractmethod

from core.domain.snapshot import Snapshot


class SnapshotRepository(ABC):
    @abstractmethod
    async def save(self, snapshot: Snapshot) -> None:
        raise NotImplementedError
