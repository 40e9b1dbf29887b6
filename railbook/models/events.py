"""원장 → 외부 협력자(티켓 렌더러, 알림) 이벤트 모델"""

from __future__ import annotations

from dataclasses import dataclass
from time import monotonic
from typing import Any


class LedgerEvent:
    """원장 이벤트 타입 상수"""

    BOOKING_CREATED = "booking.created"
    BOOKING_CANCELED = "booking.canceled"


@dataclass(frozen=True, slots=True)
class LedgerMessage:
    """구독자에게 전달되는 메시지"""

    event: str
    payload: Any
    timestamp: float = 0.0

    def __post_init__(self) -> None:
        if self.timestamp == 0.0:
            object.__setattr__(self, "timestamp", monotonic())
