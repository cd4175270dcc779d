"""Pydantic schemas shared by every context's API."""

from pydantic import BaseModel


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"


class PageMeta(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"total": 42, "page": 1, "limit": 10}]}}

    total: int
    page: int
    limit: int
