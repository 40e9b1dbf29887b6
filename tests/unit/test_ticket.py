"""TicketSkill 단위 테스트"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from railbook.models.booking import Booking
from railbook.skills.catalog import get_train
from railbook.skills.ticket import (
    QR_DIM,
    TicketSkill,
    name_hash,
    qr_placeholder,
    ticket_text,
)

BOOKING = Booking(1, "A", 30, "Female", 1, "AC")


class TestQrPlaceholder:
    def test_hash(self) -> None:
        # djb2("A") = 5381 * 33 + 65, xor 예약 번호 1
        assert name_hash(BOOKING) == (5381 * 33 + 65) ^ 1

    def test_dimensions(self) -> None:
        rows = qr_placeholder(BOOKING)
        assert len(rows) == QR_DIM
        assert all(len(r) == QR_DIM for r in rows)
        assert set("".join(rows)) <= {"#", " "}

    def test_deterministic(self) -> None:
        assert qr_placeholder(BOOKING) == qr_placeholder(BOOKING)

    def test_depends_on_name(self) -> None:
        other = Booking(1, "B", 30, "Female", 1, "AC")
        assert qr_placeholder(BOOKING) != qr_placeholder(other)


class TestTicketText:
    def test_fields(self) -> None:
        text = ticket_text(BOOKING, get_train(1), datetime(2026, 3, 1, 9, 30))
        assert "Booking ID: 1\n" in text
        assert "Name: A\n" in text
        assert "Express A (Mumbai → Delhi)" in text
        assert "Generated: 2026-03-01 09:30:00" in text


class TestTicketSkill:
    def test_render_writes_both_files(self, tmp_path: Path) -> None:
        skill = TicketSkill(tmp_path / "out")
        written = skill.render(BOOKING, get_train(1))
        assert [p.name for p in written] == ["booking_1.txt", "booking_1_qr.txt"]
        qr = (tmp_path / "out" / "booking_1_qr.txt").read_text(encoding="utf-8")
        assert qr.startswith("ASCII QR placeholder for Booking 1")

    def test_render_failure_does_not_raise(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        assert TicketSkill(blocker).render(BOOKING, get_train(1)) == []
