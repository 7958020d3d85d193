import asyncio
from collections import Counter
from functools import lru_cache
from pathlib import Path

from pydantic import ValidationError

from core.domain.host import Host
from core.exceptions.host_list_load_error import HostListLoadError
from core.port.host_repository import HostRepository
from infra.artifacts.schemas import HostListDTO
from infra.config.config import get_config


class JsonHostRepository(HostRepository):
    def __init__(self, path: Path) -> None:
        self.path = path

    async def find_all(self) -> list[Host]:
        return await asyncio.to_thread(self._read)

    def _read(self) -> list[Host]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise HostListLoadError(str(self.path), str(e)) from e

        try:
            records = HostListDTO.model_validate_json(raw).root
        except ValidationError as e:
            raise HostListLoadError(str(self.path), str(e)) from e

        duplicates = [name for name, count in Counter(record.name for record in records).items() if count > 1]
        if duplicates:
            raise HostListLoadError(str(self.path), f"duplicate host names: {', '.join(duplicates)}")

        return [record.to_domain() for record in records]


@lru_cache
def get_host_repository() -> HostRepository:
    return JsonHostRepository(Path(get_config().ARTIFACTS_CONFIG.HOSTS_PATH))
