from abc import ABC, abstractmethod

from core.domain.host import Host


class HostRepository(ABC):
    @abstractmethod
    async def find_all(self) -> list[Host]:
        raise NotImplementedError
