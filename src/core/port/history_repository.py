from abc import ABC, abstractmethod

from core.domain.history import History


class HistoryRepository(ABC):
    @abstractmethod
    async def load(self) -> History:
        raise NotImplementedError

    @abstractmethod
    async def save(self, history: History) -> None:
        raise NotImplementedError
