from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Credential:
    """Authentication material shared by every probe of a run.

    ``private_key`` is whatever the prober understands (a parsed key object for
    the SSH prober). It never shows up in ``repr`` so it cannot leak into logs.
    """

    username: str
    private_key: Any = field(repr=False)
