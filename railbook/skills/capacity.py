"""좌석 수 검사 스킬

잔여 좌석 = 열차 총 좌석 - 해당 열차 예약 수.
단일 스레드에서만 검사 후 삽입이 안전하다.
"""

from __future__ import annotations

from railbook.models.booking import Train
from railbook.models.errors import TrainFull
from railbook.skills.catalog import get_train
from railbook.skills.store import BookingStore


class CapacityChecker:
    """열차별 좌석 가용성 계산"""

    __slots__ = ("_store",)

    def __init__(self, store: BookingStore) -> None:
        self._store = store

    def available(self, train_id: int) -> int:
        train = get_train(train_id)
        return train.total_seats - self._store.count_for_train(train.id)

    def check(self, train: Train) -> None:
        """잔여 좌석이 없으면 TrainFull"""
        if self.available(train.id) <= 0:
            raise TrainFull(train)
