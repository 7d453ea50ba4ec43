from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.constants import EARLY_BEFORE_HOUR, ONTIME_LAST_HOUR, ONTIME_LAST_MINUTE
from ..core.enums import LoginStatus
from .strategies.base import LoginStatusStrategy
from .strategies.early_strategy import EarlyStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.ontime_strategy import OnTimeStrategy


@dataclass
class LoginStatusStrategyFactory:
    """Factory Pattern: choose the login status strategy from the wall clock.

    Only hour and minute of the (local) timestamp matter, the date is ignored.
    """

    early_before_hour: int = EARLY_BEFORE_HOUR
    ontime_last_hour: int = ONTIME_LAST_HOUR
    ontime_last_minute: int = ONTIME_LAST_MINUTE

    def for_login(self, *, now: datetime) -> LoginStatusStrategy:
        if now.hour < self.early_before_hour:
            return EarlyStrategy()
        if now.hour < self.ontime_last_hour or (
            now.hour == self.ontime_last_hour and now.minute <= self.ontime_last_minute
        ):
            return OnTimeStrategy()
        return LateStrategy()


def classify_login(login_time: datetime, *, factory: LoginStatusStrategyFactory | None = None) -> LoginStatus:
    factory = factory or LoginStatusStrategyFactory()
    return factory.for_login(now=login_time).decide_login(now=login_time).status
