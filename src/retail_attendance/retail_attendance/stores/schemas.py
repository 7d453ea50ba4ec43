from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class StoreLookupQuery(BaseModel):
    """``GET /stores?latitude=..&longitude=..``: query values arrive as text."""

    model_config = ConfigDict(extra="ignore")

    latitude: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    longitude: float = Field(..., ge=-180, le=180, allow_inf_nan=False)
