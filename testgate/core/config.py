import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Run settings loaded from TESTGATE_* environment variables.

    The settings object is passed explicitly to the entry point; nothing
    in the detectors reads process-wide state. CLI flags override these
    values via `model_copy(update=...)`.

    fail_fast
    ─────────
    True (default): unexpected internal exceptions propagate with a
    traceback. False: the CLI logs them and exits with the path-error code.
    A FAIL verdict is never affected by this flag.
    """

    model_config = SettingsConfigDict(
        env_prefix="TESTGATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    fail_fast: bool = True

    # None means colour only when stdout is a terminal.
    color: bool | None = None

    # Logs go to stderr; WARNING keeps normal runs quiet.
    log_level: str = "WARNING"
    json_logs: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def normalise_log_level(cls, v: str) -> str:
        level = str(v).strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {v!r}")
        return level


def get_settings() -> Settings:
    return Settings()
