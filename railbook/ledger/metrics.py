"""원장 세션 메트릭"""

from __future__ import annotations

from time import monotonic


class LedgerMetrics:
    """세션 동안의 원장 작업 집계"""

    __slots__ = (
        "bookings_created", "bookings_canceled", "rejections",
        "persist_failures", "_start_time",
    )

    def __init__(self) -> None:
        self.bookings_created: int = 0
        self.bookings_canceled: int = 0
        self.rejections: dict[str, int] = {}
        self.persist_failures: int = 0
        self._start_time: float = monotonic()

    @property
    def session_duration_s(self) -> float:
        return monotonic() - self._start_time

    @property
    def total_rejections(self) -> int:
        return sum(self.rejections.values())

    def record_booking(self) -> None:
        self.bookings_created += 1

    def record_cancel(self) -> None:
        self.bookings_canceled += 1

    def record_rejection(self, kind: str) -> None:
        self.rejections[kind] = self.rejections.get(kind, 0) + 1

    def record_persist_failure(self) -> None:
        self.persist_failures += 1

    def summary(self) -> str:
        reasons = ", ".join(
            f"{k} {v}회" for k, v in sorted(self.rejections.items())
        ) or "없음"
        return (
            f"=== 세션 요약 ===\n"
            f"  경과 시간: {self.session_duration_s / 60:.1f}분\n"
            f"  예약: {self.bookings_created}건\n"
            f"  취소: {self.bookings_canceled}건\n"
            f"  거절: {self.total_rejections}건 ({reasons})\n"
            f"  저장 실패: {self.persist_failures}회"
        )
