from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class UpdateInventoryRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    closing_stock: StrictInt = Field(..., ge=0, alias="closingStock")
