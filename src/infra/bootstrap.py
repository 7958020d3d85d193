from core.port.scheduler import Scheduler
from infra.adapter.asyncssh_prober import AsyncsshProber
from infra.adapter.json_history_repository import get_history_repository
from infra.adapter.json_host_repository import get_host_repository
from infra.adapter.json_snapshot_repository import get_snapshot_repository
from infra.config.config import Config
from infra.config.credential import load_credential
from infra.logging.config import configure_logging
from infra.services.status_check_service import StatusCheckService
from use_cases.fleet import CheckHostUseCase, RunCheckCycleUseCase, RunFleetCheckUseCase
from use_cases.history.merge_and_persist_history_use_case import MergeAndPersistHistoryUseCase
from use_cases.status.publish_status_use_case import PublishStatusUseCase


def setup_logging(config: Config) -> None:
    configure_logging(
        log_level=config.LOGGING_CONFIG.LEVEL,
        json_logs=config.LOGGING_CONFIG.JSON_FORMAT,
        service_name=config.APP_NAME,
        environment=config.ENVIRONMENT,
        library_log_levels=config.LOGGING_CONFIG.LIBRARY_LOG_LEVELS,
    )


def build_status_check_service(config: Config, scheduler: Scheduler) -> StatusCheckService:
    credential = load_credential(config.SSH_CONFIG)

    prober = AsyncsshProber(known_hosts=config.SSH_CONFIG.KNOWN_HOSTS_PATH)

    history_repository = get_history_repository()

    run_check_cycle_use_case = RunCheckCycleUseCase(
        run_fleet_check_use_case=RunFleetCheckUseCase(CheckHostUseCase(prober)),
        history_repository=history_repository,
        publish_status_use_case=PublishStatusUseCase(
            get_snapshot_repository(),
            MergeAndPersistHistoryUseCase(history_repository),
        ),
    )

    return StatusCheckService(
        check_interval_seconds=config.CHECK_INTERVAL_SECONDS,
        scheduler=scheduler,
        host_repository=get_host_repository(),
        credential=credential,
        policy=config.CHECK_CONFIG.to_policy(),
        run_check_cycle_use_case=run_check_cycle_use_case,
    )
