from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.check_policy import DEFAULT_RETENTION_LIMIT, CheckPolicy
from infra.utils.version import get_version


class LoggingConfig(BaseModel):
    LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    JSON_FORMAT: bool = False
    LIBRARY_LOG_LEVELS: dict[str, str | int] = Field(default_factory=lambda: {"asyncssh": "WARNING"})


class CheckConfig(BaseModel):
    MAX_ATTEMPTS: int = Field(default=4, ge=1)
    ATTEMPT_TIMEOUT_MS: int = Field(default=20_000, gt=0)
    RETRY_DELAY_MS: int = Field(default=5_000, ge=0)
    RETENTION_LIMIT: int = Field(default=DEFAULT_RETENTION_LIMIT, ge=1)
    MAX_CONCURRENCY: Optional[int] = Field(default=None, ge=1)

    def to_policy(self) -> CheckPolicy:
        return CheckPolicy(
            max_attempts=self.MAX_ATTEMPTS,
            attempt_timeout_ms=self.ATTEMPT_TIMEOUT_MS,
            retry_delay_ms=self.RETRY_DELAY_MS,
            retention_limit=self.RETENTION_LIMIT,
            max_concurrency=self.MAX_CONCURRENCY,
        )


class SshConfig(BaseModel):
    USERNAME: str = "adminuser"
    PRIVATE_KEY: Optional[SecretStr] = None
    PRIVATE_KEY_PATH: str = "./admin_recovery_key"
    PASSPHRASE: Optional[SecretStr] = None
    # None skips host key verification
    KNOWN_HOSTS_PATH: Optional[str] = None


class ArtifactsConfig(BaseModel):
    HOSTS_PATH: str = "./public/data/servers.json"
    STATUS_PATH: str = "./public/data/status.json"
    HISTORY_PATH: str = "./public/data/history.json"


class Config(BaseSettings):
    APP_NAME: str = "py-server-status"
    VERSION: str = get_version()
    ENVIRONMENT: Literal["loc", "dev", "pre", "pro"] = "dev"
    ROOT_PATH: str = ""

    HOST: str = "0.0.0.0"
    PORT: int = 8080

    LOGGING_CONFIG: LoggingConfig = LoggingConfig()
    CHECK_CONFIG: CheckConfig = CheckConfig()
    SSH_CONFIG: SshConfig = SshConfig()
    ARTIFACTS_CONFIG: ArtifactsConfig = ArtifactsConfig()

    CHECK_INTERVAL_SECONDS: int = Field(default=1_200, ge=1)

    model_config = SettingsConfigDict(
        frozen=True,
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_nested_delimiter="__",
    )


@lru_cache
def get_config() -> Config:
    return Config()
