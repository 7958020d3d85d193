from abc import ABC, abstractmethod
from typing import Any, Callable, Optional


class Scheduler(ABC):
    """Runs jobs on a fixed interval, never overlapping two runs of the same job."""

    @abstractmethod
    def start(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def stop(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def add_job(
        self,
        job_key: str,
        func: Callable[..., Any],
        interval_seconds: int,
        args: tuple = (),
        kwargs: Optional[dict] = None,
        job_name: Optional[str] = None,
        run_immediately: bool = False,
    ) -> str:
        raise NotImplementedError

    @abstractmethod
    def remove_job(self, job_key: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def has_job(self, job_key: str) -> bool:
        raise NotImplementedError
