"""철도 승차권 예약 원장 - CLI 진입점

사용 예시:
    python -m railbook.main
    python -m railbook.main --data-file data/bookings.dat --notify desktop
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Optional

from railbook.ledger import Ledger
from railbook.models.booking import Booking, Train
from railbook.models.config import LedgerConfig
from railbook.models.errors import LedgerError, PersistenceReadFailed
from railbook.models.events import LedgerEvent, LedgerMessage
from railbook.skills.catalog import find_train
from railbook.skills.notifier import NotifierSkill
from railbook.skills.ticket import TicketSkill
from railbook.skills.validation import ValidationSkill
from railbook.utils.logging_config import setup_logging


BANNER = r"""
  ╔══════════════════════════════════════════════╗
  ║   Railway Ticket Booker                      ║
  ║   철도 승차권 예약 원장 v1.0.0               ║
  ╚══════════════════════════════════════════════╝
"""

MENU = """
================ Railway Ticket Booker ================
1. 열차 목록
2. 승차권 예약
3. 전체 예약 조회
4. 예약 번호로 검색
5. 예약 취소
6. 종료"""


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="철도 승차권 예약 원장",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "예시:\n"
            "  python -m railbook.main --data-file bookings.dat\n"
            "  python -m railbook.main --notify desktop,webhook"
        ),
    )
    p.add_argument(
        "--data-file",
        type=Path,
        default=Path("bookings.dat"),
        help="예약 레코드 파일 (기본: bookings.dat)",
    )
    p.add_argument(
        "--ticket-dir",
        type=Path,
        default=Path("."),
        help="티켓 파일 출력 디렉터리 (기본: 현재 디렉터리)",
    )
    p.add_argument(
        "--no-tickets",
        action="store_true",
        help="티켓/QR 파일을 생성하지 않음",
    )
    p.add_argument(
        "--notify",
        default="",
        help="예약 알림 방법 (desktop,sound,webhook 콤마 구분)",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    p.add_argument("--log-file", default=None, help="로그 파일 경로")
    return p


def build_config(args: argparse.Namespace) -> LedgerConfig:
    return LedgerConfig(
        data_file=args.data_file,
        ticket_dir=args.ticket_dir,
        write_tickets=not args.no_tickets,
        notification_methods=[m.strip() for m in args.notify.split(",") if m.strip()],
        webhook_url=os.environ.get("RAILBOOK_WEBHOOK_URL", ""),
        log_level=args.log_level,
        log_file=args.log_file,
    )


def ticket_listener(ticket: TicketSkill) -> Callable[[LedgerMessage], None]:
    def _on_message(msg: LedgerMessage) -> None:
        if msg.event != LedgerEvent.BOOKING_CREATED:
            return
        booking, train = msg.payload
        for path in ticket.render(booking, train):
            print(f"  티켓 저장: {path}")

    return _on_message


class PendingNotifications:
    """예약 알림 대기열

    원장 구독자로 등록되어 확정된 예약만 쌓아 두고,
    book()이 반환된 뒤 메뉴 루프에서 dispatch()로 발송한다.
    """

    __slots__ = ("_notifier", "_queue")

    def __init__(self, notifier: NotifierSkill) -> None:
        self._notifier = notifier
        self._queue: list[tuple[Booking, Train]] = []

    def __call__(self, msg: LedgerMessage) -> None:
        if msg.event == LedgerEvent.BOOKING_CREATED:
            self._queue.append(msg.payload)

    def __len__(self) -> int:
        return len(self._queue)

    def dispatch(self) -> int:
        """대기 중인 알림 발송. 발송 건수 반환."""
        if not self._queue:
            return 0
        items, self._queue = self._queue, []

        async def _send_all() -> None:
            await asyncio.gather(
                *(self._notifier.send(b, t) for b, t in items),
                return_exceptions=True,
            )

        asyncio.run(_send_all())
        return len(items)


def build_ledger(
    config: LedgerConfig,
) -> tuple[Ledger, Optional[PendingNotifications]]:
    """원장 생성 + 외부 협력자 연결"""
    ledger = Ledger(config)
    if config.write_tickets:
        ledger.subscribe(ticket_listener(TicketSkill(config.ticket_dir)))

    pending = None
    if config.notification_methods:
        pending = PendingNotifications(NotifierSkill(
            methods=config.notification_methods,
            webhook_url=config.webhook_url,
            timeout=config.webhook_timeout,
        ))
        ledger.subscribe(pending)
    return ledger, pending


# ── 화면 출력 ──

def format_trains(ledger: Ledger) -> str:
    lines = [
        "",
        "운행 열차:",
        f"{'ID':<4} {'Name':<18} {'From -> To':<24} {'Seats Avail':>11}",
        "-" * 60,
    ]
    for train, avail in ledger.availability():
        route = f"{train.origin} -> {train.destination}"
        lines.append(f"{train.id:<4} {train.name:<18} {route:<24} {avail:>11}")
    return "\n".join(lines)


def format_bookings(ledger: Ledger) -> str:
    listing = ledger.list()
    if not len(listing):
        return "\n예약 내역이 없습니다."
    lines = [
        "",
        "--- 전체 예약 ---",
        f"{'ID':<4} {'Name':<28} {'Age':<4} {'Gender':<7} {'Train':<15} Class",
        "-" * 70,
    ]
    for booking, train in listing:
        train_name = train.name if train else "Unknown"
        lines.append(
            f"{booking.booking_id:<4} {booking.passenger_name:<28} "
            f"{booking.age:<4} {booking.gender:<7} {train_name:<15} "
            f"{booking.travel_class}"
        )
    return "\n".join(lines)


def format_booking_detail(ledger: Ledger, booking_id: int) -> str:
    booking = ledger.find(booking_id)
    train = find_train(booking.train_id)
    route = train.display() if train else "Unknown"
    return (
        f"\n예약 정보:\n"
        f"  예약 번호: {booking.booking_id}\n"
        f"  이름: {booking.passenger_name}\n"
        f"  나이: {booking.age}\n"
        f"  성별: {booking.gender}\n"
        f"  열차: {route}\n"
        f"  등급: {booking.travel_class}"
    )


# ── 메뉴 동작 ──

def prompt_booking(ledger: Ledger, validator: ValidationSkill) -> None:
    print("\n--- 승차권 예약 ---")
    name = input("  승객 이름: ").strip()
    while not name:
        name = input("  이름은 비워둘 수 없습니다. 승객 이름: ").strip()
    age = input("  나이: ")
    gender = input("  성별 (Male/Female/Other): ")
    print(format_trains(ledger))
    train_id = input("  예약할 열차 ID: ")
    travel_class = input("  등급 (예: Sleeper, AC, 2A): ")

    candidate = validator.validate_booking({
        "name": name,
        "age": age,
        "gender": gender,
        "train_id": train_id,
        "travel_class": travel_class,
    })
    booking = ledger.book(candidate)
    print(f"\n  예약 완료! 예약 번호: {booking.booking_id}")


def prompt_id(label: str) -> int:
    return ValidationSkill.parse_int(input(f"\n  {label}: "), "예약 번호")


def handle_choice(ledger: Ledger, choice: str, validator: ValidationSkill) -> bool:
    """메뉴 선택 처리. 종료 시 False."""
    if choice == "1":
        print(format_trains(ledger))
    elif choice == "2":
        prompt_booking(ledger, validator)
    elif choice == "3":
        print(format_bookings(ledger))
    elif choice == "4":
        print(format_booking_detail(ledger, prompt_id("검색할 예약 번호")))
    elif choice == "5":
        booking = ledger.cancel(prompt_id("취소할 예약 번호"))
        print(f"  예약 {booking.booking_id} 취소 완료")
    elif choice == "6":
        return False
    else:
        print("  [오류] 1-6 중에서 선택하세요")
        return True

    if ledger.last_persist_error is not None:
        print(f"  [경고] {ledger.last_persist_error}")
    return True


def run_menu(
    ledger: Ledger,
    pending: Optional[PendingNotifications] = None,
) -> None:
    validator = ValidationSkill()
    if ledger.load_warning is not None:
        print(f"  [경고] {ledger.load_warning}")

    while True:
        print(MENU)
        choice = input("선택: ").strip()
        try:
            if not handle_choice(ledger, choice, validator):
                break
        except (LedgerError, ValueError) as e:
            print(f"  [오류] {e}")
        finally:
            if pending is not None:
                pending.dispatch()


def cli_entry() -> None:
    """CLI 진입점 (pyproject.toml scripts에서 호출)"""
    main()


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = build_config(args)

    setup_logging(config)

    print(BANNER)
    try:
        ledger, pending = build_ledger(config)
    except PersistenceReadFailed as e:
        print(f"  [오류] {e}")
        sys.exit(1)

    try:
        run_menu(ledger, pending)
    except (KeyboardInterrupt, EOFError):
        print()
    finally:
        if not ledger.flush():
            print(f"  [경고] {ledger.last_persist_error}")
        print(f"\n{ledger.metrics.summary()}")
        print("  프로그램 종료")


if __name__ == "__main__":
    main()
