from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class QueryPayload(BaseModel):
    """Parameterized statement sent to the query-execution service."""

    model_config = ConfigDict(frozen=True)

    sql: str = Field(..., min_length=1)
    args: list[Any] = Field(default_factory=list)


class CreateRecordResponse(BaseModel):
    """Success body for ``POST /create``."""

    message: str = "Registro creado exitosamente"
    id: Any = None
