import asyncio
from datetime import datetime
from typing import Optional

import structlog

from core.domain.check_policy import CheckPolicy
from core.domain.credential import Credential
from core.port.host_repository import HostRepository
from core.port.scheduler import Scheduler
from infra.utils.formatters import format_milliseconds
from use_cases.fleet.run_check_cycle_use_case import CheckCycleResult, RunCheckCycleUseCase

logger = structlog.stdlib.get_logger(__name__)

CHECK_CYCLE_JOB_KEY = "check_cycle"


class StatusCheckService:
    def __init__(
        self,
        check_interval_seconds: int,
        scheduler: Scheduler,
        host_repository: HostRepository,
        credential: Credential,
        policy: CheckPolicy,
        run_check_cycle_use_case: RunCheckCycleUseCase,
    ):
        self.CHECK_INTERVAL_SECONDS = check_interval_seconds
        self.scheduler = scheduler
        self.host_repository = host_repository
        self.credential = credential
        self.policy = policy
        self.run_check_cycle_use_case = run_check_cycle_use_case

        self.last_cycle_at: Optional[datetime] = None
        self.last_cycle_error: Optional[str] = None
        self._cycle_lock = asyncio.Lock()

    async def start(self) -> None:
        logger.info(f"Status check service started (interval: {self.CHECK_INTERVAL_SECONDS}s)")

        self.scheduler.add_job(
            job_key=CHECK_CYCLE_JOB_KEY,
            func=self._scheduled_cycle,
            interval_seconds=self.CHECK_INTERVAL_SECONDS,
            job_name="Check all servers",
            run_immediately=True,
        )

    async def run_cycle(self) -> CheckCycleResult:
        # two cycles must never interleave their history load and save
        async with self._cycle_lock:
            hosts = await self.host_repository.find_all()
            result = await self.run_check_cycle_use_case.execute(hosts, self.credential, self.policy)

        self.last_cycle_at = result.snapshot.last_update
        self.last_cycle_error = None

        for verdict in result.snapshot:
            logger.info(
                f"'{verdict.host_name}': {verdict.state.value}"
                + (f" in {format_milliseconds(verdict.response_time_ms)}" if verdict.is_online else "")
            )

        return result

    async def _scheduled_cycle(self) -> None:
        try:
            await self.run_cycle()
        except Exception as e:
            self.last_cycle_error = str(e)
            logger.exception(f"Check cycle failed: {e}")
