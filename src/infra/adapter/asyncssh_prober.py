import asyncio
import time
from typing import Any, Callable, Optional

import asyncssh
import structlog

from core.domain.attempt_outcome import AttemptError, AttemptOutcome, AttemptSuccess, AttemptTimeout
from core.domain.credential import Credential
from core.domain.host import Host
from core.port.prober import Prober

logger = structlog.stdlib.get_logger(__name__)

CLOSE_TIMEOUT_SECONDS = 5.0


class AsyncsshProber(Prober):
    """Probes a host by completing an SSH public-key login and disconnecting.

    The deadline covers the TCP connect and the whole SSH handshake. Whichever
    finishes first, the login or the deadline, decides the outcome: a login
    that completes after the deadline was already cancelled and never counts.
    """

    def __init__(
        self,
        known_hosts: Optional[str] = None,
        connect: Callable[..., Any] = asyncssh.connect,
        close_timeout_seconds: float = CLOSE_TIMEOUT_SECONDS,
    ) -> None:
        self.known_hosts = known_hosts
        self.close_timeout_seconds = close_timeout_seconds
        self._connect = connect

    async def probe(self, host: Host, credential: Credential, deadline_seconds: float) -> AttemptOutcome:
        started = time.monotonic()

        try:
            async with asyncio.timeout(deadline_seconds):
                connection = await self._connect(
                    host.address,
                    port=host.port,
                    username=credential.username,
                    client_keys=[credential.private_key],
                    known_hosts=self.known_hosts,
                )
        except TimeoutError:
            return AttemptTimeout()
        except (OSError, asyncssh.Error) as e:
            return AttemptError(message=str(e) or type(e).__name__)
        except Exception as e:
            logger.exception(f"Unexpected error probing '{host.name}': {e}")
            return AttemptError(message=str(e) or type(e).__name__)

        elapsed_ms = round((time.monotonic() - started) * 1_000)

        await self._disconnect(host, connection)

        return AttemptSuccess(elapsed_ms=elapsed_ms)

    async def _disconnect(self, host: Host, connection: Any) -> None:
        # the login already succeeded; a slow or failing teardown does not change that
        try:
            async with asyncio.timeout(self.close_timeout_seconds):
                connection.close()
                await connection.wait_closed()
        except (TimeoutError, OSError, asyncssh.Error) as e:
            logger.debug(f"Could not cleanly close connection to '{host.name}': {e!r}")
