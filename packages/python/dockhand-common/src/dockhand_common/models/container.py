"""Container record models built from runtime listing and inspect output."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ComposeInfo(BaseModel):
    """Compose metadata read from the labels the compose tooling applies."""

    model_config = ConfigDict(frozen=True)

    project: str = Field(min_length=1)
    service: str | None = None
    config_files: str | None = Field(default=None, serialization_alias="configFiles")
    working_dir: str | None = Field(default=None, serialization_alias="workingDir")

    @property
    def config_file_list(self) -> list[str]:
        """Config files as a list (the label holds them comma-separated)."""
        if not self.config_files:
            return []
        return [f.strip() for f in self.config_files.split(",") if f.strip()]


class ContainerRecord(BaseModel):
    """Snapshot of one container as reported by the runtime."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    status: str
    compose: ComposeInfo | None = None

    def to_dict(self) -> dict[str, Any]:
        """Plain dict with camelCase keys; ``compose`` is left out when absent."""
        return self.model_dump(by_alias=True, exclude_none=True)
