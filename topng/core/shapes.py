from pathlib import Path
from typing import Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, field_validator

from topng.core.formats import FileKind

PauseMode: TypeAlias = Literal["auto", "always", "never"]

LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    log_level: str = "WARNING"
    pause: PauseMode = "auto"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v: str | None) -> str:
        level = (v or "WARNING").strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("pause", mode="before")
    @classmethod
    def _lower_pause(cls, v: str | None) -> str:
        return (v or "auto").strip().lower()


class ConversionResult(BaseModel):
    source: Path
    destination: Path
    kind: FileKind
    source_deleted: bool
