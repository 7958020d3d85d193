from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import FileResponse

from infra.adapter.json_history_repository import get_history_repository
from infra.config.config import get_config
from infra.web.routers.schemas.summary import HistorySummaryResponseDTO
from use_cases.history.get_history_summary_use_case import GetHistorySummaryUseCase

router = APIRouter(prefix="/data", tags=["Data"])


def _artifact_response(path: str) -> FileResponse:
    artifact = Path(path)

    if not artifact.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{artifact.name} not available yet")

    return FileResponse(artifact, media_type="application/json", headers={"Cache-Control": "no-cache"})


def get_history_summary_use_case() -> GetHistorySummaryUseCase:
    return GetHistorySummaryUseCase(get_history_repository())


@router.get("/servers.json", summary="Configured server list")
async def get_servers() -> FileResponse:
    return _artifact_response(get_config().ARTIFACTS_CONFIG.HOSTS_PATH)


@router.get("/status.json", summary="Latest status snapshot")
async def get_status() -> FileResponse:
    return _artifact_response(get_config().ARTIFACTS_CONFIG.STATUS_PATH)


@router.get("/history.json", summary="Rolling status history")
async def get_history() -> FileResponse:
    return _artifact_response(get_config().ARTIFACTS_CONFIG.HISTORY_PATH)


@router.get(
    "/summary",
    response_model=list[HistorySummaryResponseDTO],
    response_model_by_alias=True,
    summary="Uptime and response time figures per server over the retained history",
)
async def get_summary(
    use_case: GetHistorySummaryUseCase = Depends(get_history_summary_use_case),
) -> list[HistorySummaryResponseDTO]:
    summaries = await use_case.execute()

    return [HistorySummaryResponseDTO.from_domain(summary) for summary in summaries]
