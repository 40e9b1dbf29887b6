"""BookingStore 단위 테스트"""

from __future__ import annotations

from railbook.models.booking import Booking
from railbook.skills.store import BookingStore


def _b(booking_id: int, train_id: int = 1) -> Booking:
    return Booking(booking_id, f"P{booking_id}", 30, "Male", train_id, "AC")


class TestBookingStore:
    def test_empty(self) -> None:
        store = BookingStore()
        assert len(store) == 0
        assert list(store) == []
        assert store.max_id() == 0

    def test_insert_most_recent_first(self) -> None:
        store = BookingStore()
        store.insert(_b(1))
        store.insert(_b(2))
        assert [b.booking_id for b in store] == [2, 1]

    def test_initial_records_keep_order(self) -> None:
        store = BookingStore([_b(5), _b(3), _b(4)])
        assert [b.booking_id for b in store] == [5, 3, 4]
        assert store.max_id() == 5

    def test_find(self) -> None:
        store = BookingStore([_b(1), _b(2)])
        assert store.find(2) == _b(2)
        assert store.find(99) is None

    def test_remove(self) -> None:
        store = BookingStore([_b(1), _b(2), _b(3)])
        assert store.remove(2) is True
        assert [b.booking_id for b in store] == [1, 3]
        assert store.remove(2) is False
        assert len(store) == 2

    def test_count_for_train(self) -> None:
        store = BookingStore([_b(1, 4), _b(2, 4), _b(3, 1)])
        assert store.count_for_train(4) == 2
        assert store.count_for_train(1) == 1
        assert store.count_for_train(5) == 0

    def test_enumeration_stable(self) -> None:
        store = BookingStore([_b(1), _b(2)])
        assert list(store) == list(store)
