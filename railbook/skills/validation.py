"""입력 검증 스킬

운영자 입력값을 검증하고 후보 Booking을 생성한다.
열차 존재 여부는 원장(book)에서 UnknownTrain으로 판단한다.
"""

from __future__ import annotations

import logging
from typing import Any

from railbook.models.booking import (
    CLASS_WIDTH,
    GENDER_WIDTH,
    INT32_MAX,
    NAME_WIDTH,
    Booking,
    truncate_field,
)

logger = logging.getLogger("railbook.skill.validation")


class ValidationSkill:
    """입력 검증 스킬"""

    def validate_booking(self, data: dict[str, Any]) -> Booking:
        """전체 검증 후 후보 Booking 반환. 실패 시 ValueError."""

        name = str(data.get("name") or "").strip()
        gender = str(data.get("gender") or "").strip()
        travel_class = str(data.get("travel_class") or "").strip()

        if not name:
            raise ValueError("승객 이름이 입력되지 않았습니다")

        age = self.parse_int(data.get("age"), "나이")
        self.validate_age(age)
        train_id = self.parse_int(data.get("train_id"), "열차 ID")

        for label, value, width in (
            ("이름", name, NAME_WIDTH),
            ("성별", gender, GENDER_WIDTH),
            ("등급", travel_class, CLASS_WIDTH),
        ):
            if truncate_field(value, width) != value:
                logger.info("%s 필드가 %d바이트로 잘립니다: %r", label, width - 1, value)

        return Booking.candidate(
            passenger_name=name,
            age=age,
            gender=gender,
            train_id=train_id,
            travel_class=travel_class,
        )

    @staticmethod
    def parse_int(value: Any, label: str) -> int:
        if isinstance(value, bool):
            raise ValueError(f"{label}은(는) 정수여야 합니다")
        if isinstance(value, int):
            return value
        try:
            return int(str(value).strip())
        except (TypeError, ValueError):
            raise ValueError(f"{label}은(는) 정수여야 합니다: {value!r}") from None

    @staticmethod
    def validate_age(age: int) -> None:
        if age < 0:
            raise ValueError("나이는 0 이상이어야 합니다")
        if age > INT32_MAX:
            raise ValueError(f"나이는 {INT32_MAX} 이하여야 합니다")
