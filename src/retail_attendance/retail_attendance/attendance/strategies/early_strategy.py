from __future__ import annotations

from datetime import datetime

from ...core.enums import LoginStatus
from .base import LoginStatusStrategy, StatusDecision


class EarlyStrategy(LoginStatusStrategy):
    """Login before the working day starts."""

    def decide_login(self, *, now: datetime) -> StatusDecision:
        return StatusDecision(status=LoginStatus.EARLY)
