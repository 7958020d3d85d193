import asyncio
import time
from datetime import datetime, timezone
from typing import Awaitable, Callable

import structlog

from core.domain.attempt_outcome import AttemptError, AttemptSuccess
from core.domain.check_policy import CheckPolicy
from core.domain.credential import Credential
from core.domain.host import Host
from core.domain.verdict import Verdict
from core.port.prober import Prober

logger = structlog.stdlib.get_logger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CheckHostUseCase:
    """Confirms one host's state with a bounded number of sequential probes.

    The first successful attempt makes the host online. A host is only
    declared offline after every attempt failed, with a fixed pause between
    attempts. Worst case this takes ``max_attempts * attempt_timeout`` plus the
    pauses, which is the price of not flagging a host offline on a single
    dropped connection.
    """

    def __init__(
        self,
        prober: Prober,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.prober = prober
        self.sleep = sleep
        self.clock = clock

    async def execute(self, host: Host, credential: Credential, policy: CheckPolicy) -> Verdict:
        for attempt in range(1, policy.max_attempts + 1):
            started = time.monotonic()
            outcome = await self.prober.probe(host, credential, policy.attempt_timeout_seconds)
            elapsed_ms = round((time.monotonic() - started) * 1_000)

            if isinstance(outcome, AttemptSuccess):
                logger.info(
                    "Probe attempt succeeded",
                    host=host.name,
                    attempt=attempt,
                    max_attempts=policy.max_attempts,
                    outcome=outcome.label,
                    elapsed_ms=outcome.elapsed_ms,
                )

                return Verdict.online(host.name, outcome.elapsed_ms, self.clock())

            logger.warning(
                "Probe attempt failed",
                host=host.name,
                attempt=attempt,
                max_attempts=policy.max_attempts,
                outcome=outcome.label,
                elapsed_ms=elapsed_ms,
                error=outcome.message if isinstance(outcome, AttemptError) else None,
            )

            if attempt < policy.max_attempts:
                await self.sleep(policy.retry_delay_seconds)

        logger.warning(f"Host '{host.name}' is offline after {policy.max_attempts} failed attempts")

        return Verdict.offline(host.name, self.clock())
