"""원장 오류 계층

모든 오류는 원장 경계에서 복구 가능하다. CLI는 메시지를 출력하고 계속 진행한다.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from railbook.models.booking import Booking, Train


class LedgerError(Exception):
    """원장 오류 기본 클래스"""


class UnknownTrain(LedgerError):
    def __init__(self, train_id: int) -> None:
        super().__init__(f"열차 ID {train_id}을(를) 찾을 수 없습니다")
        self.train_id = train_id


class TrainFull(LedgerError):
    def __init__(self, train: Train) -> None:
        super().__init__(f"{train.name} 열차는 잔여 좌석이 없습니다")
        self.train = train


class DuplicateBooking(LedgerError):
    def __init__(self, existing: Booking) -> None:
        super().__init__(
            f"동일한 예약이 이미 존재합니다 (예약 번호 {existing.booking_id})"
        )
        self.existing = existing


class BookingNotFound(LedgerError):
    def __init__(self, booking_id: int) -> None:
        super().__init__(f"예약 번호 {booking_id}을(를) 찾을 수 없습니다")
        self.booking_id = booking_id


class InvalidBooking(LedgerError):
    """레코드 파일에 저장할 수 없는 후보 예약"""

    def __init__(self, reason: str) -> None:
        super().__init__(f"잘못된 예약 정보: {reason}")
        self.reason = reason


class PersistenceWriteFailed(LedgerError):
    def __init__(self, path: Path, cause: Exception) -> None:
        super().__init__(f"예약 파일 저장 실패: {path} ({cause})")
        self.path = path
        self.cause = cause


class PersistenceReadFailed(LedgerError):
    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"예약 파일 읽기 실패: {path} ({cause})")
        self.path = path
        self.cause = cause


class PersistenceReadTruncated(LedgerError):
    """마지막 불완전 레코드 폐기 (치명적이지 않음)"""

    def __init__(self, path: Path, extra_bytes: int) -> None:
        super().__init__(
            f"예약 파일 끝의 불완전한 레코드 {extra_bytes}바이트를 무시했습니다: {path}"
        )
        self.path = path
        self.extra_bytes = extra_bytes
