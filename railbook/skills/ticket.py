"""티켓 렌더링 스킬

예약 확정 후 텍스트 티켓(booking_<id>.txt)과
ASCII QR 대체 이미지(booking_<id>_qr.txt)를 생성한다.
실패는 로그만 남기고 원장에는 영향을 주지 않는다.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from railbook.models.booking import Booking, Train

logger = logging.getLogger("railbook.skill.ticket")

QR_DIM = 21


def name_hash(booking: Booking) -> int:
    """djb2(이름) xor 예약 번호 (32비트)"""
    h = 5381
    for byte in booking.passenger_name.encode("utf-8"):
        h = ((h << 5) + h + byte) & 0xFFFFFFFF
    return h ^ (booking.booking_id & 0xFFFFFFFF)


def qr_placeholder(booking: Booking, dim: int = QR_DIM) -> list[str]:
    """결정적 dim×dim ASCII 블록"""
    h = name_hash(booking)
    rows: list[str] = []
    for y in range(dim):
        row = []
        for x in range(dim):
            val = (h + x * 131 + y * 137) & 0xFF
            row.append("#" if val % 3 == 0 else " ")
        rows.append("".join(row))
    return rows


def ticket_text(booking: Booking, train: Train, generated: datetime) -> str:
    return (
        f"Booking ID: {booking.booking_id}\n"
        f"Name: {booking.passenger_name}\n"
        f"Age: {booking.age}\n"
        f"Gender: {booking.gender}\n"
        f"Train: {train.id} {train.display()}\n"
        f"Class: {booking.travel_class}\n"
        f"Generated: {generated:%Y-%m-%d %H:%M:%S}\n"
    )


class TicketSkill:
    """텍스트 티켓 + QR 대체 이미지 작성"""

    __slots__ = ("_out_dir",)

    def __init__(self, out_dir: str | Path = ".") -> None:
        self._out_dir = Path(out_dir)

    def ticket_path(self, booking: Booking) -> Path:
        return self._out_dir / f"booking_{booking.booking_id}.txt"

    def qr_path(self, booking: Booking) -> Path:
        return self._out_dir / f"booking_{booking.booking_id}_qr.txt"

    def render(self, booking: Booking, train: Train) -> list[Path]:
        """작성된 파일 경로 목록 반환. I/O 실패 시 빈 목록."""
        written: list[Path] = []
        try:
            self._out_dir.mkdir(parents=True, exist_ok=True)

            path = self.ticket_path(booking)
            path.write_text(
                ticket_text(booking, train, datetime.now()), encoding="utf-8",
            )
            written.append(path)

            qr = self.qr_path(booking)
            body = "\n".join(qr_placeholder(booking))
            qr.write_text(
                f"ASCII QR placeholder for Booking {booking.booking_id}\n\n{body}\n",
                encoding="utf-8",
            )
            written.append(qr)
        except OSError as e:
            logger.warning("티켓 파일 작성 실패 (예약 %d): %s", booking.booking_id, e)
            return written

        logger.info("티켓 저장: %s", ", ".join(str(p) for p in written))
        return written
