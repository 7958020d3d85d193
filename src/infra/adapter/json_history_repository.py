import asyncio
from functools import lru_cache
from pathlib import Path

import structlog
from pydantic import ValidationError

from core.domain.history import History
from core.port.history_repository import HistoryRepository
from infra.artifacts.schemas import HistoryArtifactDTO
from infra.config.config import get_config
from infra.utils.atomic_write import write_text_atomically

logger = structlog.stdlib.get_logger(__name__)


class JsonHistoryRepository(HistoryRepository):
    def __init__(self, path: Path) -> None:
        self.path = path

    async def load(self) -> History:
        return await asyncio.to_thread(self._read)

    async def save(self, history: History) -> None:
        content = HistoryArtifactDTO.from_domain(history).model_dump_json(by_alias=True, indent=2)

        await asyncio.to_thread(write_text_atomically, self.path, content + "\n")

    def _read(self) -> History:
        if not self.path.exists():
            logger.info(f"No history found at '{self.path}', starting with an empty history")
            return {}

        try:
            raw = self.path.read_text(encoding="utf-8")
            return HistoryArtifactDTO.model_validate_json(raw).to_domain()
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            logger.warning(f"History at '{self.path}' is unreadable, starting with an empty history: {e}")
            return {}


@lru_cache
def get_history_repository() -> HistoryRepository:
    return JsonHistoryRepository(Path(get_config().ARTIFACTS_CONFIG.HISTORY_PATH))
