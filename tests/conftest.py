"""pytest 공통 픽스처

모든 테스트에서 공유하는 샘플 예약과 임시 원장을 제공한다.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from railbook.ledger import Ledger
from railbook.models.booking import Booking
from railbook.models.config import LedgerConfig


@pytest.fixture(autouse=True)
def reset_loggers() -> Iterator[None]:
    """setup_logging이 바꾼 로거 상태 복구 (caplog는 전파에 의존)"""
    yield
    for name in ("railbook", "aiohttp.client"):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """임시 예약 레코드 파일 경로 (아직 생성되지 않음)"""
    return tmp_path / "bookings.dat"


@pytest.fixture
def ledger_config(data_file: Path, tmp_path: Path) -> LedgerConfig:
    """테스트용 설정 (티켓은 tmp_path/tickets, 알림 없음)"""
    return LedgerConfig(
        data_file=data_file,
        ticket_dir=tmp_path / "tickets",
        notification_methods=[],
    )


@pytest.fixture
def ledger(ledger_config: LedgerConfig) -> Ledger:
    """빈 원장"""
    return Ledger(ledger_config)


@pytest.fixture
def ann_lee() -> Booking:
    """표준 후보 예약 (Express A, AC)"""
    return Booking.candidate(
        passenger_name="Ann Lee",
        age=30,
        gender="Female",
        train_id=1,
        travel_class="AC",
    )


@pytest.fixture
def three_passengers() -> list[Booking]:
    """서로 다른 승객 3명"""
    return [
        Booking.candidate("Ann Lee", 30, "Female", 1, "AC"),
        Booking.candidate("Ravi Kumar", 45, "Male", 2, "Sleeper"),
        Booking.candidate("Meera Das", 22, "Other", 3, "2A"),
    ]
