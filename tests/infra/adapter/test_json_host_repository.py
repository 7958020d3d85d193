import json
from pathlib import Path

import pytest

from core.domain.host import Host
from core.exceptions.host_list_load_error import HostListLoadError
from infra.adapter.json_host_repository import JsonHostRepository


def _write(path: Path, payload) -> Path:
    path.write_text(json.dumps(payload))
    return path


@pytest.mark.asyncio
async def test_hosts_are_loaded_in_configured_order(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "servers.json",
        [
            {"name": "web-1", "ip": "10.0.0.1", "port": 22},
            {"name": "db-1", "ip": "db.internal", "port": 2222},
        ],
    )

    hosts = await JsonHostRepository(path).find_all()

    assert hosts == [Host("web-1", "10.0.0.1", 22), Host("db-1", "db.internal", 2222)]


@pytest.mark.asyncio
async def test_missing_host_list_fails(tmp_path: Path) -> None:
    with pytest.raises(HostListLoadError, match="servers.json"):
        await JsonHostRepository(tmp_path / "servers.json").find_all()


@pytest.mark.asyncio
async def test_host_list_with_invalid_utf8_fails(tmp_path: Path) -> None:
    path = tmp_path / "servers.json"
    path.write_bytes(b'[{"name": "web-\xff\xfe')

    with pytest.raises(HostListLoadError, match="servers.json"):
        await JsonHostRepository(path).find_all()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"name": "web-1"},
        [{"name": "", "ip": "10.0.0.1", "port": 22}],
        [{"name": "web-1", "ip": "10.0.0.1", "port": 0}],
        [{"name": "web-1", "port": 22}],
    ],
)
async def test_invalid_host_list_fails(tmp_path: Path, payload) -> None:
    path = _write(tmp_path / "servers.json", payload)

    with pytest.raises(HostListLoadError):
        await JsonHostRepository(path).find_all()


@pytest.mark.asyncio
async def test_duplicate_host_names_fail(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "servers.json",
        [{"name": "web-1", "ip": "10.0.0.1", "port": 22}, {"name": "web-1", "ip": "10.0.0.2", "port": 22}],
    )

    with pytest.raises(HostListLoadError, match="duplicate host names: web-1"):
        await JsonHostRepository(path).find_all()
