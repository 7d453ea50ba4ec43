from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from ...core.enums import LoginStatus


@dataclass(frozen=True)
class StatusDecision:
    status: LoginStatus


class LoginStatusStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide a login status."""

    @abstractmethod
    def decide_login(self, *, now: datetime) -> StatusDecision:
        raise NotImplementedError
