"""예약 원장 (Ledger Facade)

저장소, 파일 영속화, 번호 할당, 중복 감지, 좌석 검사를 조합하여
book / cancel / find / list / availability 작업을 제공한다.

모든 작업은 단일 스레드에서 순차 실행된다. 동시 접근을 지원하려면
검증 + 삽입 + 저장을 하나의 배타적 잠금 안에서 수행해야 한다.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Optional

from railbook.models.booking import INT32_MAX, INT32_MIN, Booking, Train
from railbook.models.config import LedgerConfig
from railbook.models.errors import (
    BookingNotFound,
    DuplicateBooking,
    InvalidBooking,
    PersistenceReadTruncated,
    PersistenceWriteFailed,
    TrainFull,
    UnknownTrain,
)
from railbook.models.events import LedgerEvent, LedgerMessage
from railbook.ledger.metrics import LedgerMetrics
from railbook.skills.allocator import IdAllocator
from railbook.skills.capacity import CapacityChecker
from railbook.skills.catalog import TRAINS, find_train, get_train
from railbook.skills.duplicate import find_duplicate
from railbook.skills.persistence import BookingFile
from railbook.skills.store import BookingStore

logger = logging.getLogger("railbook.ledger")

Listener = Callable[[LedgerMessage], None]


class BookingListing:
    """예약 목록 뷰: 반복할 때마다 현재 저장소 순서로 (Booking, Train) 생성"""

    __slots__ = ("_store",)

    def __init__(self, store: BookingStore) -> None:
        self._store = store

    def __iter__(self) -> Iterator[tuple[Booking, Optional[Train]]]:
        for booking in tuple(self._store):
            yield booking, find_train(booking.train_id)

    def __len__(self) -> int:
        return len(self._store)


class Ledger:
    """예약 원장"""

    __slots__ = (
        "_config", "_file", "_store", "_ids", "_capacity",
        "_listeners", "_metrics", "_last_persist_error", "_load_warning",
    )

    def __init__(
        self,
        config: Optional[LedgerConfig] = None,
        booking_file: Optional[BookingFile] = None,  # 테스트용 의존성 주입
    ) -> None:
        self._config = config or LedgerConfig()
        self._file = booking_file or BookingFile(self._config.data_file)
        self._listeners: list[Listener] = []
        self._metrics = LedgerMetrics()
        self._last_persist_error: Optional[PersistenceWriteFailed] = None

        loaded = self._file.load()
        self._load_warning: Optional[PersistenceReadTruncated] = loaded.truncated
        self._store = BookingStore(loaded.bookings)
        self._ids = IdAllocator(loaded.next_id)
        self._capacity = CapacityChecker(self._store)

        for b in self._store:
            if find_train(b.train_id) is None:
                logger.warning(
                    "예약 %d이(가) 카탈로그에 없는 열차 %d을(를) 참조합니다",
                    b.booking_id, b.train_id,
                )
        logger.info(
            "원장 준비 완료 (예약 %d건, 다음 번호 %d)", len(self._store), self._ids.peek,
        )

    @classmethod
    def open(cls, data_file: str | Path) -> Ledger:
        return cls(LedgerConfig(data_file=Path(data_file)))

    # ── Properties ──

    @property
    def config(self) -> LedgerConfig:
        return self._config

    @property
    def metrics(self) -> LedgerMetrics:
        return self._metrics

    @property
    def last_persist_error(self) -> Optional[PersistenceWriteFailed]:
        """마지막 저장 실패 (이후 저장이 성공하면 None)"""
        return self._last_persist_error

    @property
    def load_warning(self) -> Optional[PersistenceReadTruncated]:
        return self._load_warning

    @property
    def next_booking_id(self) -> int:
        return self._ids.peek

    def __len__(self) -> int:
        return len(self._store)

    # ── Subscribers ──

    def subscribe(self, listener: Listener) -> None:
        """예약/취소 이벤트 구독 (티켓 렌더러, 알림 등)"""
        self._listeners.append(listener)

    def _emit(self, event: str, payload: object) -> None:
        msg = LedgerMessage(event=event, payload=payload)
        for listener in self._listeners:
            try:
                listener(msg)
            except Exception as e:  # 구독자 실패는 원장에 영향 없음
                logger.warning("구독자 처리 실패 (%s): %s", event, e)

    # ── Persistence ──

    def _persist(self) -> bool:
        try:
            self._file.save(self._store)
        except PersistenceWriteFailed as e:
            logger.error("%s", e)
            self._last_persist_error = e
            self._metrics.record_persist_failure()
            return False
        self._last_persist_error = None
        return True

    def flush(self) -> bool:
        """현재 저장소를 강제로 저장"""
        return self._persist()

    # ── Operations ──

    def _check_storable(self, candidate: Booking) -> None:
        """레코드 파일에 저장할 수 없는 후보는 저장소에 들어가기 전에 거절"""
        if not candidate.passenger_name.strip():
            raise InvalidBooking("승객 이름이 비어 있습니다")
        if not INT32_MIN <= candidate.age <= INT32_MAX:
            raise InvalidBooking(f"나이 범위 초과: {candidate.age}")
        if self._ids.peek > INT32_MAX:
            raise InvalidBooking("예약 번호가 모두 소진되었습니다")

    def book(self, candidate: Booking) -> Booking:
        """후보 예약 확정

        실패 우선순위: InvalidBooking → UnknownTrain → TrainFull → DuplicateBooking.
        거절된 후보는 번호를 소비하지 않는다.
        """
        try:
            self._check_storable(candidate)
            train = get_train(candidate.train_id)
            self._capacity.check(train)
            existing = find_duplicate(self._store, candidate)
            if existing is not None:
                raise DuplicateBooking(existing)
        except (InvalidBooking, UnknownTrain, TrainFull, DuplicateBooking) as e:
            self._metrics.record_rejection(type(e).__name__)
            logger.info("예약 거절: %s", e)
            raise

        booking = candidate.with_id(self._ids.next())
        self._store.insert(booking)
        self._persist()
        self._metrics.record_booking()
        logger.info("예약 완료: %s", booking.summary())

        self._emit(LedgerEvent.BOOKING_CREATED, (booking, train))
        return booking

    def cancel(self, booking_id: int) -> Booking:
        """예약 취소. 번호는 재사용되지 않는다."""
        booking = self._store.find(booking_id)
        if booking is None or not self._store.remove(booking_id):
            self._metrics.record_rejection(BookingNotFound.__name__)
            raise BookingNotFound(booking_id)

        self._persist()
        self._metrics.record_cancel()
        logger.info("예약 취소: %s", booking.summary())

        self._emit(LedgerEvent.BOOKING_CANCELED, booking)
        return booking

    def find(self, booking_id: int) -> Booking:
        booking = self._store.find(booking_id)
        if booking is None:
            raise BookingNotFound(booking_id)
        return booking

    def list(self) -> BookingListing:
        return BookingListing(self._store)

    def available(self, train_id: int) -> int:
        return self._capacity.available(train_id)

    def availability(self) -> Iterator[tuple[Train, int]]:
        """카탈로그 순서로 (열차, 잔여 좌석)"""
        for train in TRAINS:
            yield train, self._capacity.available(train.id)
