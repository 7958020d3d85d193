import os
import time
from datetime import datetime, timezone
from typing import Any

import psutil
from fastapi import APIRouter, Request, Response, status

from infra.config.config import get_config
from infra.utils.formatters import format_bytes, format_time

router = APIRouter(prefix="/stats", tags=["Stats"])

_start_time: float = time.time()
_current_process: psutil.Process = psutil.Process(os.getpid())


@router.get(
    "/health",
    response_model=dict[str, Any],
    status_code=status.HTTP_200_OK,
    summary="Get monitor health status",
)
async def get_health(request: Request, response: Response):
    config = get_config()
    service = getattr(request.app.state, "status_check_service", None)

    try:
        memory_info = _current_process.memory_full_info()

        return {
            "status": "UP" if service is None or service.last_cycle_error is None else "DEGRADED",
            "uptime": format_time(time.time() - _start_time),
            "app_name": config.APP_NAME,
            "version": config.VERSION,
            "ram": format_bytes(memory_info.rss),
            "cpu_percent": _current_process.cpu_percent(interval=0.1),
            "last_cycle_at": service.last_cycle_at if service is not None else None,
            "last_cycle_error": service.last_cycle_error if service is not None else None,
            "timestamp": datetime.now(timezone.utc),
        }

    except psutil.Error as e:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

        return {
            "status": "DEGRADED",
            "error": str(e),
            "timestamp": datetime.now(timezone.utc),
        }
