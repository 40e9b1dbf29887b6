"""예약 파일 영속화 스킬

고정 크기 바이너리 레코드 파일 (헤더/구분자 없음).
레코드 = booking_id, 이름(100B), 나이, 성별(10B), 열차 ID, 등급(20B).

저장은 매번 전체 재작성이며, 임시 파일에 쓴 뒤 os.replace로 교체한다.
"""

from __future__ import annotations

import logging
import os
import struct
import tempfile
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from railbook.models.booking import (
    CLASS_WIDTH,
    GENDER_WIDTH,
    NAME_WIDTH,
    Booking,
)
from railbook.models.errors import (
    PersistenceReadFailed,
    PersistenceReadTruncated,
    PersistenceWriteFailed,
)

logger = logging.getLogger("railbook.skill.persistence")

RECORD = struct.Struct(f"<i{NAME_WIDTH}si{GENDER_WIDTH}si{CLASS_WIDTH}s")


def _pack_text(text: str, width: int) -> bytes:
    # struct가 NUL로 채운다. 마지막 바이트는 항상 NUL.
    return text.encode("utf-8")[: width - 1]


def _unpack_text(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def encode_record(b: Booking) -> bytes:
    return RECORD.pack(
        b.booking_id,
        _pack_text(b.passenger_name, NAME_WIDTH),
        b.age,
        _pack_text(b.gender, GENDER_WIDTH),
        b.train_id,
        _pack_text(b.travel_class, CLASS_WIDTH),
    )


def decode_record(data: bytes) -> Booking:
    booking_id, name, age, gender, train_id, travel_class = RECORD.unpack(data)
    return Booking(
        booking_id=booking_id,
        passenger_name=_unpack_text(name),
        age=age,
        gender=_unpack_text(gender),
        train_id=train_id,
        travel_class=_unpack_text(travel_class),
    )


@dataclass(frozen=True, slots=True)
class LoadResult:
    """파일 로드 결과"""

    bookings: tuple[Booking, ...]
    truncated: Optional[PersistenceReadTruncated] = None

    @property
    def next_id(self) -> int:
        return max((b.booking_id for b in self.bookings), default=0) + 1


class BookingFile:
    """예약 레코드 파일"""

    __slots__ = ("_path",)

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> LoadResult:
        """파일 전체 로드. 파일이 없으면 빈 결과."""
        try:
            data = self._path.read_bytes()
        except FileNotFoundError:
            logger.info("예약 파일 없음 - 빈 저장소로 시작: %s", self._path)
            return LoadResult(bookings=())
        except OSError as e:
            raise PersistenceReadFailed(self._path, e) from e

        size = RECORD.size
        complete = len(data) - len(data) % size
        bookings = tuple(
            decode_record(data[i:i + size]) for i in range(0, complete, size)
        )

        truncated = None
        if complete != len(data):
            truncated = PersistenceReadTruncated(self._path, len(data) - complete)
            logger.warning("%s", truncated)

        logger.info("예약 %d건 로드: %s", len(bookings), self._path)
        return LoadResult(bookings=bookings, truncated=truncated)

    def save(self, bookings: Iterable[Booking]) -> int:
        """열거 순서대로 전체 재작성. 실패 시 PersistenceWriteFailed."""
        tmp_name: Optional[str] = None
        try:
            payload = b"".join(encode_record(b) for b in bookings)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                dir=self._path.parent,
            )
            with os.fdopen(fd, "wb") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self._path)
            tmp_name = None
        except (OSError, struct.error) as e:
            raise PersistenceWriteFailed(self._path, e) from e
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)

        count = len(payload) // RECORD.size
        logger.debug("예약 %d건 저장: %s", count, self._path)
        return count
