"""원장 설정 모델"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class LedgerConfig:
    """원장 설정 - 저장 경로, 티켓 출력, 알림 채널"""

    # 저장소
    data_file: Path = Path("bookings.dat")

    # 티켓 출력
    ticket_dir: Path = Path(".")
    write_tickets: bool = True

    # 알림 설정
    notification_methods: list[str] = field(default_factory=list)
    webhook_url: str = ""
    webhook_timeout: float = 10.0

    # 로깅
    log_level: str = "INFO"
    log_file: str | None = None

    def __post_init__(self) -> None:
        self.data_file = Path(self.data_file)
        self.ticket_dir = Path(self.ticket_dir)
