"""예약 저장소 (메모리)

원장이 소유하는 순서 있는 예약 컬렉션. 검증과 파일 I/O는 하지 않는다.
최근 예약이 앞에 온다.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional

from railbook.models.booking import Booking


class BookingStore:
    """예약 레코드 컬렉션"""

    __slots__ = ("_records",)

    def __init__(self, records: Iterable[Booking] = ()) -> None:
        self._records: list[Booking] = list(records)

    def __iter__(self) -> Iterator[Booking]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def insert(self, booking: Booking) -> None:
        """맨 앞에 추가 (제약 검사는 호출자 책임)"""
        self._records.insert(0, booking)

    def remove(self, booking_id: int) -> bool:
        for i, b in enumerate(self._records):
            if b.booking_id == booking_id:
                del self._records[i]
                return True
        return False

    def find(self, booking_id: int) -> Optional[Booking]:
        for b in self._records:
            if b.booking_id == booking_id:
                return b
        return None

    def count_for_train(self, train_id: int) -> int:
        return sum(1 for b in self._records if b.train_id == train_id)

    def max_id(self) -> int:
        return max((b.booking_id for b in self._records), default=0)
