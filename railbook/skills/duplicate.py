"""중복 예약 감지 스킬

동일 나이 + 동일 열차 + 정규화된 이름/등급이 같으면 중복으로 본다.
정규화: 모든 공백 제거 후 casefold.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from railbook.models.booking import Booking


def normalize(text: str) -> str:
    """'Ann  Lee ' → 'annlee'"""
    return "".join(text.split()).casefold()


def is_equivalent(a: Booking, b: Booking) -> bool:
    return (
        a.age == b.age
        and a.train_id == b.train_id
        and normalize(a.passenger_name) == normalize(b.passenger_name)
        and normalize(a.travel_class) == normalize(b.travel_class)
    )


def find_duplicate(
    bookings: Iterable[Booking], candidate: Booking,
) -> Optional[Booking]:
    """첫 번째 일치 레코드 반환 (없으면 None)"""
    for existing in bookings:
        if is_equivalent(existing, candidate):
            return existing
    return None


def is_duplicate(bookings: Iterable[Booking], candidate: Booking) -> bool:
    return find_duplicate(bookings, candidate) is not None
