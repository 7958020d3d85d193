import asyncio
from contextlib import AbstractAsyncContextManager, nullcontext
from datetime import datetime
from typing import Callable

import structlog

from core.domain.check_policy import CheckPolicy
from core.domain.credential import Credential
from core.domain.host import Host
from core.domain.snapshot import Snapshot
from core.domain.verdict import Verdict
from use_cases.fleet.check_host_use_case import CheckHostUseCase, utc_now

logger = structlog.stdlib.get_logger(__name__)


class RunFleetCheckUseCase:
    def __init__(self, check_host_use_case: CheckHostUseCase, clock: Callable[[], datetime] = utc_now) -> None:
        self.check_host_use_case = check_host_use_case
        self.clock = clock

    async def execute(self, hosts: list[Host], credential: Credential, policy: CheckPolicy) -> Snapshot:
        logger.info(f"Checking {len(hosts)} hosts")

        limiter: AbstractAsyncContextManager = (
            asyncio.Semaphore(policy.max_concurrency) if policy.max_concurrency else nullcontext()
        )

        async def check(host: Host) -> Verdict:
            async with limiter:
                return await self.check_host_use_case.execute(host, credential, policy)

        # gather keeps results in argument order, not completion order
        verdicts = await asyncio.gather(*[check(host) for host in hosts])

        snapshot = Snapshot(last_update=self.clock(), verdicts=list(verdicts))

        logger.info(f"Fleet check finished: {snapshot.online_count}/{len(snapshot)} hosts online")

        return snapshot
