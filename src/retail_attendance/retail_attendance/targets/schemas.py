from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, model_validator


class UpdateTargetRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    engagement_daily_target: Optional[StrictInt] = Field(None, ge=0, alias="engagementDailyTarget")
    engagement_achieved: Optional[StrictInt] = Field(None, ge=0, alias="engagementAchieved")
    conversation_daily_target: Optional[StrictInt] = Field(None, ge=0, alias="conversationDailyTarget")
    conversation_achieved: Optional[StrictInt] = Field(None, ge=0, alias="conversationAchieved")

    @model_validator(mode="after")
    def _at_least_one_field(self) -> "UpdateTargetRequest":
        if not self.changes():
            raise ValueError("at least one target field is required")
        return self

    def changes(self) -> dict[str, int]:
        return self.model_dump(exclude_none=True, by_alias=False)
