from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class AttemptSuccess:
    elapsed_ms: int

    @property
    def label(self) -> str:
        return "success"


@dataclass(frozen=True)
class AttemptTimeout:
    @property
    def label(self) -> str:
        return "timeout"


@dataclass(frozen=True)
class AttemptError:
    message: str

    @property
    def label(self) -> str:
        return "error"


AttemptOutcome = Union[AttemptSuccess, AttemptTimeout, AttemptError]
