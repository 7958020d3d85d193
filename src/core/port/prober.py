from abc import ABC, abstractmethod

from core.domain.attempt_outcome import AttemptOutcome
from core.domain.credential import Credential
from core.domain.host import Host


class Prober(ABC):
    @abstractmethod
    async def probe(self, host: Host, credential: Credential, deadline_seconds: float) -> AttemptOutcome:
        raise NotImplementedError
