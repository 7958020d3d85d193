import json
from pathlib import Path

import pytest
from fastapi import FastAPI

from infra.web.routers.artifacts_router import router as artifacts_router


@pytest.fixture
def artifacts_app() -> FastAPI:
    app = FastAPI()
    app.include_router(artifacts_router)
    return app


@pytest.mark.asyncio
async def test_artifacts_are_served_as_json(artifacts_app: FastAPI, artifacts_dir: Path, async_client_factory) -> None:
    artifacts_dir.mkdir(parents=True)
    (artifacts_dir / "servers.json").write_text(json.dumps([{"name": "web-1", "ip": "10.0.0.1", "port": 22}]))
    (artifacts_dir / "status.json").write_text(json.dumps({"lastUpdate": "2026-10-19T12:00:00Z", "servers": []}))

    client = await async_client_factory(artifacts_app)

    servers = await client.get("/data/servers.json")
    status = await client.get("/data/status.json")

    assert servers.status_code == 200
    assert servers.json()[0]["name"] == "web-1"
    assert status.status_code == 200
    assert status.headers["content-type"].startswith("application/json")
    assert status.headers["cache-control"] == "no-cache"
    assert status.json()["servers"] == []


@pytest.mark.asyncio
async def test_missing_artifact_returns_404(artifacts_app: FastAPI, async_client_factory) -> None:
    client = await async_client_factory(artifacts_app)

    response = await client.get("/data/history.json")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_summary_reports_uptime_per_server(
    artifacts_app: FastAPI, artifacts_dir: Path, async_client_factory
) -> None:
    artifacts_dir.mkdir(parents=True)
    (artifacts_dir / "history.json").write_text(
        json.dumps(
            {
                "web-1": [
                    {"timestamp": "2026-10-19T12:00:00Z", "status": "online", "responseTime": 40},
                    {"timestamp": "2026-10-19T12:20:00Z", "status": "online", "responseTime": 60},
                    {"timestamp": "2026-10-19T12:40:00Z", "status": "offline", "responseTime": 0},
                    {"timestamp": "2026-10-19T13:00:00Z", "status": "offline", "responseTime": 0},
                ]
            }
        )
    )

    client = await async_client_factory(artifacts_app)
    response = await client.get("/data/summary")

    assert response.status_code == 200
    assert response.json() == [
        {
            "name": "web-1",
            "totalChecks": 4,
            "onlineChecks": 2,
            "uptime": 50.0,
            "avgResponseTime": 50,
            "maxResponseTime": 60,
        }
    ]
