from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, Field, field_validator


class Task(BaseModel):
    id: str = Field(..., min_length=1, description="Caller-assigned task identifier.")
    description: str = ""
    note: str = ""
    applications: List[str] = Field(default_factory=list)

    # JSON null means "empty" for the optional fields.
    @field_validator("description", "note", mode="before")
    @classmethod
    def _null_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("applications", mode="before")
    @classmethod
    def _null_applications(cls, value: Any) -> Any:
        return [] if value is None else value
