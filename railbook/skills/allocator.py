"""예약 번호 할당

단조 증가, 재사용 없음. 로드 시 max(booking_id) + 1 로 시드된다.
"""

from __future__ import annotations

from collections.abc import Iterable

from railbook.models.booking import Booking


class IdAllocator:
    __slots__ = ("_next",)

    def __init__(self, start: int = 1) -> None:
        if start < 1:
            raise ValueError("예약 번호는 1 이상이어야 합니다")
        self._next = start

    @classmethod
    def seeded_from(cls, bookings: Iterable[Booking]) -> IdAllocator:
        return cls(max((b.booking_id for b in bookings), default=0) + 1)

    @property
    def peek(self) -> int:
        return self._next

    def next(self) -> int:
        value = self._next
        self._next += 1
        return value
