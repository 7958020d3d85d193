from use_cases.fleet.check_host_use_case import CheckHostUseCase
from use_cases.fleet.run_check_cycle_use_case import CheckCycleResult, RunCheckCycleUseCase
from use_cases.fleet.run_fleet_check_use_case import RunFleetCheckUseCase

__all__ = [
    "CheckCycleResult",
    "CheckHostUseCase",
    "RunCheckCycleUseCase",
    "RunFleetCheckUseCase",
]
