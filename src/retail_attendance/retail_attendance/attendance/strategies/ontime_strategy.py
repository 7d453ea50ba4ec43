from __future__ import annotations

from datetime import datetime

from ...core.enums import LoginStatus
from .base import LoginStatusStrategy, StatusDecision


class OnTimeStrategy(LoginStatusStrategy):
    """Login inside the opening window."""

    def decide_login(self, *, now: datetime) -> StatusDecision:
        return StatusDecision(status=LoginStatus.ONTIME)
