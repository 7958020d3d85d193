from dataclasses import dataclass

from apscheduler.jobstores.base import JobLookupError

from infra.adapter.local_scheduler import LocalScheduler


@dataclass
class FakeJob:
    id: str


class FakeBaseScheduler:
    def __init__(self) -> None:
        self.started = False
        self.stopped = False
        self.add_calls: list[dict] = []
        self.removed_ids: list[str] = []
        self.raise_on_remove = False

    def start(self) -> None:
        self.started = True

    def shutdown(self, wait: bool = True) -> None:
        self.stopped = wait

    def add_job(self, **kwargs):
        self.add_calls.append(kwargs)
        return FakeJob(id=kwargs["id"])

    def remove_job(self, job_id: str) -> None:
        if self.raise_on_remove:
            raise JobLookupError(job_id)

        self.removed_ids.append(job_id)


def test_local_scheduler_registers_non_overlapping_job() -> None:
    backend = FakeBaseScheduler()
    scheduler = LocalScheduler(backend)

    scheduler.start()
    job_id = scheduler.add_job(
        job_key="check_cycle",
        func=lambda: None,
        interval_seconds=1200,
        kwargs={"x": 1},
        job_name="Check all servers",
    )
    scheduler.stop()

    assert job_id == "check_cycle"
    assert backend.started is True
    assert backend.stopped is True
    assert backend.add_calls[0]["kwargs"] == {"x": 1}
    assert backend.add_calls[0]["max_instances"] == 1
    assert backend.add_calls[0]["name"] == "Check all servers"
    assert scheduler.has_job("check_cycle") is True


def test_local_scheduler_replaces_existing_job_before_add() -> None:
    backend = FakeBaseScheduler()
    scheduler = LocalScheduler(backend)

    scheduler.add_job("job-1", lambda: None, 10)
    scheduler.add_job("job-1", lambda: None, 20)

    assert backend.removed_ids == ["job-1"]
    assert len(backend.add_calls) == 2
    assert scheduler.has_job("job-1") is True


def test_local_scheduler_remove_job_handles_missing_backend_job() -> None:
    backend = FakeBaseScheduler()
    scheduler = LocalScheduler(backend)

    scheduler.add_job("job-1", lambda: None, 10)
    backend.raise_on_remove = True

    assert scheduler.remove_job("job-1") is False
    assert scheduler.has_job("job-1") is False
    assert scheduler.remove_job("unknown") is False


def test_local_scheduler_runs_job_right_away_when_asked() -> None:
    backend = FakeBaseScheduler()
    scheduler = LocalScheduler(backend)

    scheduler.add_job("check_cycle", lambda: None, 1200, run_immediately=True)

    assert backend.add_calls[0]["next_run_time"] is not None
    assert backend.add_calls[0]["next_run_time"].tzinfo is not None


def test_local_scheduler_leaves_first_run_to_trigger_by_default() -> None:
    backend = FakeBaseScheduler()
    scheduler = LocalScheduler(backend)

    scheduler.add_job("check_cycle", lambda: None, 1200)

    # an explicit None would register the job paused
    assert "next_run_time" not in backend.add_calls[0]
