from dataclasses import dataclass

import structlog

from core.domain.check_policy import CheckPolicy
from core.domain.credential import Credential
from core.domain.history import History
from core.domain.host import Host
from core.domain.snapshot import Snapshot
from core.port.history_repository import HistoryRepository
from use_cases.fleet.run_fleet_check_use_case import RunFleetCheckUseCase
from use_cases.status.publish_status_use_case import PublishStatusUseCase

logger = structlog.stdlib.get_logger(__name__)


@dataclass(frozen=True)
class CheckCycleResult:
    snapshot: Snapshot
    history: History


class RunCheckCycleUseCase:
    def __init__(
        self,
        run_fleet_check_use_case: RunFleetCheckUseCase,
        history_repository: HistoryRepository,
        publish_status_use_case: PublishStatusUseCase,
    ) -> None:
        self.run_fleet_check_use_case = run_fleet_check_use_case
        self.history_repository = history_repository
        self.publish_status_use_case = publish_status_use_case

    async def execute(self, hosts: list[Host], credential: Credential, policy: CheckPolicy) -> CheckCycleResult:
        history = await self.history_repository.load()

        snapshot = await self.run_fleet_check_use_case.execute(hosts, credential, policy)

        # history is only touched after every host check has finished
        history = await self.publish_status_use_case.execute(snapshot, history, policy.retention_limit)

        logger.info("Status and history published", hosts=len(snapshot), online=snapshot.online_count)

        return CheckCycleResult(snapshot=snapshot, history=history)
