from collections.abc import AsyncGenerator, Generator
from pathlib import Path

import httpx
import pytest

from infra.adapter.json_history_repository import get_history_repository
from infra.adapter.json_host_repository import get_host_repository
from infra.adapter.json_snapshot_repository import get_snapshot_repository
from infra.adapter.local_scheduler import get_local_scheduler
from infra.config.config import get_config


@pytest.fixture(autouse=True)
def artifacts_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    data_dir = tmp_path / "data"

    monkeypatch.setenv("ARTIFACTS_CONFIG__HOSTS_PATH", str(data_dir / "servers.json"))
    monkeypatch.setenv("ARTIFACTS_CONFIG__STATUS_PATH", str(data_dir / "status.json"))
    monkeypatch.setenv("ARTIFACTS_CONFIG__HISTORY_PATH", str(data_dir / "history.json"))

    for name in ["SSH_CONFIG__PRIVATE_KEY", "SSH_CONFIG__PASSPHRASE", "SSH_CONFIG__KNOWN_HOSTS_PATH"]:
        monkeypatch.delenv(name, raising=False)

    monkeypatch.setenv("SSH_CONFIG__PRIVATE_KEY_PATH", str(tmp_path / "missing_key"))

    return data_dir


@pytest.fixture(autouse=True)
def _reset_cached_singletons() -> Generator[None, None, None]:
    cacheables = [
        get_config,
        get_history_repository,
        get_host_repository,
        get_snapshot_repository,
        get_local_scheduler,
    ]

    for cacheable in cacheables:
        cacheable.cache_clear()

    yield

    for cacheable in cacheables:
        cacheable.cache_clear()


@pytest.fixture(scope="session")
def ssh_private_key_pem() -> str:
    asyncssh = pytest.importorskip("asyncssh")

    key = asyncssh.generate_private_key("ssh-ed25519")
    return key.export_private_key().decode()


@pytest.fixture
async def async_client_factory() -> AsyncGenerator:
    clients: list[httpx.AsyncClient] = []

    async def _factory(app, *, raise_app_exceptions: bool = True) -> httpx.AsyncClient:
        transport = httpx.ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
        client = httpx.AsyncClient(transport=transport, base_url="http://testserver")
        clients.append(client)
        return client

    try:
        yield _factory
    finally:
        for client in clients:
            await client.aclose()
