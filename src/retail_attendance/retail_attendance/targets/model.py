from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..stores.model import Store
from ..users.model import User


def completion_percentage(achieved: int, target: int) -> int:
    """Rounded share of a daily target reached; 0 when no target is set."""
    if target <= 0:
        return 0
    return int(achieved * 100 / target + 0.5)


@dataclass(frozen=True)
class Target:
    """Daily engagement/conversation quota of one staff member."""

    target_id: int
    user_id: int
    store_id: int
    engagement_daily_target: int
    conversation_daily_target: int
    target_date: date
    engagement_achieved: int = 0
    conversation_achieved: int = 0

    def to_dict(self) -> dict:
        return {
            "id": self.target_id,
            "userId": self.user_id,
            "storeId": self.store_id,
            "engagementDailyTarget": self.engagement_daily_target,
            "engagementAchieved": self.engagement_achieved,
            "engagementPercentage": completion_percentage(self.engagement_achieved, self.engagement_daily_target),
            "conversationDailyTarget": self.conversation_daily_target,
            "conversationAchieved": self.conversation_achieved,
            "conversationPercentage": completion_percentage(
                self.conversation_achieved, self.conversation_daily_target
            ),
            "date": self.target_date.isoformat(),
        }


@dataclass(frozen=True)
class TargetView:
    target: Target
    user: User
    store: Store

    def to_dict(self) -> dict:
        out = self.target.to_dict()
        out["user"] = self.user.to_dict()
        out["store"] = self.store.to_dict()
        return out
