from dataclasses import dataclass
from typing import Optional

DEFAULT_RETENTION_LIMIT = 504


@dataclass(frozen=True)
class CheckPolicy:
    max_attempts: int = 4
    attempt_timeout_ms: int = 20_000
    retry_delay_ms: int = 5_000
    retention_limit: int = DEFAULT_RETENTION_LIMIT
    max_concurrency: Optional[int] = None

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1: {self.max_attempts}")

        if self.attempt_timeout_ms <= 0:
            raise ValueError(f"attempt_timeout_ms must be positive: {self.attempt_timeout_ms}")

        if self.retry_delay_ms < 0:
            raise ValueError(f"retry_delay_ms cannot be negative: {self.retry_delay_ms}")

        if self.retention_limit < 1:
            raise ValueError(f"retention_limit must be at least 1: {self.retention_limit}")

        if self.max_concurrency is not None and self.max_concurrency < 1:
            raise ValueError(f"max_concurrency must be at least 1: {self.max_concurrency}")

    @property
    def attempt_timeout_seconds(self) -> float:
        return self.attempt_timeout_ms / 1_000

    @property
    def retry_delay_seconds(self) -> float:
        return self.retry_delay_ms / 1_000
