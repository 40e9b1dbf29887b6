"""데이터 모델: 열차, 예약

모든 모델은 frozen=True + slots=True로 불변성과 메모리 효율을 보장한다.
문자열 필드는 레코드 파일의 고정 폭(바이트)에 맞춰 잘린다.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

# 레코드 파일 고정 폭 (NUL 종료 1바이트 포함)
NAME_WIDTH = 100
GENDER_WIDTH = 10
CLASS_WIDTH = 20

# 정수 필드는 부호 있는 32비트로 저장된다
INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


def truncate_field(text: str, width: int) -> str:
    """첫 NUL 이전까지, UTF-8 기준 width-1 바이트로 자르기.

    문자 경계가 깨지지 않게 하며, 저장 후 다시 읽은 값과 항상 같다.
    """
    text = text.split("\0", 1)[0]
    raw = text.encode("utf-8")
    if len(raw) < width:
        return text
    return raw[: width - 1].decode("utf-8", errors="ignore")


@dataclass(frozen=True, slots=True)
class Train:
    """카탈로그 열차 (런타임 변경 불가)"""

    id: int
    name: str
    origin: str
    destination: str
    total_seats: int

    def display(self) -> str:
        return f"{self.name} ({self.origin} → {self.destination})"


@dataclass(frozen=True, slots=True)
class Booking:
    """예약 레코드

    booking_id == 0 은 아직 번호가 할당되지 않은 후보 예약이다.
    """

    booking_id: int
    passenger_name: str
    age: int
    gender: str
    train_id: int
    travel_class: str

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "passenger_name", truncate_field(self.passenger_name, NAME_WIDTH),
        )
        object.__setattr__(self, "gender", truncate_field(self.gender, GENDER_WIDTH))
        object.__setattr__(
            self, "travel_class", truncate_field(self.travel_class, CLASS_WIDTH),
        )

    @classmethod
    def candidate(
        cls,
        passenger_name: str,
        age: int,
        gender: str,
        train_id: int,
        travel_class: str,
    ) -> Booking:
        """번호 미할당 후보 예약 생성"""
        return cls(0, passenger_name, age, gender, train_id, travel_class)

    @property
    def is_assigned(self) -> bool:
        return self.booking_id > 0

    def with_id(self, booking_id: int) -> Booking:
        return replace(self, booking_id=booking_id)

    def summary(self) -> str:
        return (
            f"#{self.booking_id} {self.passenger_name} "
            f"({self.age}, {self.gender}) 열차 {self.train_id} {self.travel_class}"
        )
