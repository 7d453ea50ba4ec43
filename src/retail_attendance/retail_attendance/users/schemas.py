from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr


class Coordinates(BaseModel):
    latitude: StrictFloat = Field(..., ge=-90, le=90, allow_inf_nan=False)
    longitude: StrictFloat = Field(..., ge=-180, le=180, allow_inf_nan=False)


class StaffLoginRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    phone: StrictStr = Field(..., min_length=1)
    store_id: StrictInt = Field(..., gt=0, alias="storeId")
    coordinates: Coordinates
    face_scan: StrictStr = Field(..., min_length=1, alias="faceScan")


class AdminLoginRequest(BaseModel):
    phone: StrictStr = Field(..., min_length=1)
    password: StrictStr = Field(..., min_length=1)


class LogoutRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    face_scan: Optional[StrictStr] = Field(None, alias="faceScan")
