from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterator

from core.domain.verdict import Verdict


@dataclass(frozen=True)
class Snapshot:
    last_update: datetime
    verdicts: list[Verdict] = field(default_factory=list)

    def __iter__(self) -> Iterator[Verdict]:
        return iter(self.verdicts)

    def __len__(self) -> int:
        return len(self.verdicts)

    @property
    def online_count(self) -> int:
        return len([verdict for verdict in self.verdicts if verdict.is_online])
