"""알림 스킬: Desktop / Sound / Webhook

예약 확정 알림을 다채널 병렬로 발송한다. 개별 채널 실패는 격리된다.
"""

from __future__ import annotations

import asyncio
import logging
import platform
import subprocess
from dataclasses import dataclass
from typing import Optional

import aiohttp

from railbook.models.booking import Booking, Train

logger = logging.getLogger("railbook.skill.notifier")


@dataclass(frozen=True, slots=True)
class NotificationPayload:
    """알림 페이로드"""

    title: str
    message: str
    booking_id: int


def build_payload(booking: Booking, train: Train) -> NotificationPayload:
    return NotificationPayload(
        title=f"예약 완료 #{booking.booking_id}",
        message=(
            f"{booking.passenger_name} | {train.display()} | "
            f"{booking.travel_class}"
        ),
        booking_id=booking.booking_id,
    )


class NotifierSkill:
    """다채널 알림 스킬"""

    __slots__ = ("_methods", "_webhook_url", "_timeout")

    def __init__(
        self,
        methods: Optional[list[str]] = None,
        webhook_url: str = "",
        timeout: float = 10.0,
    ) -> None:
        self._methods = methods or []
        self._webhook_url = webhook_url
        self._timeout = timeout

    @property
    def methods(self) -> list[str]:
        return list(self._methods)

    async def send(self, booking: Booking, train: Train) -> None:
        """예약 확정 알림 발송"""
        if not self._methods:
            return

        payload = build_payload(booking, train)

        tasks: list[asyncio.Task[None]] = []
        for method in self._methods:
            if method == "desktop":
                tasks.append(
                    asyncio.ensure_future(self._desktop_notify(payload))
                )
            elif method == "sound":
                tasks.append(
                    asyncio.ensure_future(self._sound_notify())
                )
            elif method == "webhook":
                tasks.append(
                    asyncio.ensure_future(
                        self._webhook_notify(
                            payload, self._webhook_url, self._timeout,
                        )
                    )
                )
            else:
                logger.warning("알 수 없는 알림 방법: %s", method)

        if tasks:
            results = await asyncio.gather(*tasks, return_exceptions=True)
            for r in results:
                if isinstance(r, Exception):
                    logger.warning("알림 채널 실패: %s", r)

    @staticmethod
    async def _desktop_notify(payload: NotificationPayload) -> None:
        """OS 데스크톱 알림"""
        system = platform.system()

        if system == "Darwin":
            subprocess.Popen(  # noqa: S603
                [
                    "osascript", "-e",
                    f'display notification "{payload.message[:150]}" '
                    f'with title "{payload.title}"',
                ],
            )
        elif system == "Linux":
            subprocess.Popen(  # noqa: S603
                ["notify-send", payload.title, payload.message[:200]],
            )
        else:
            logger.debug("데스크톱 알림 미지원 플랫폼: %s", system)

    @staticmethod
    async def _sound_notify() -> None:
        """알림음"""
        print("\a", end="", flush=True)

    @staticmethod
    async def _webhook_notify(
        payload: NotificationPayload,
        webhook_url: str,
        timeout: float,
    ) -> None:
        """Webhook 알림 (Slack/Discord)"""
        if not webhook_url:
            return

        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    webhook_url,
                    json={"text": f"*{payload.title}*\n{payload.message}"},
                    timeout=aiohttp.ClientTimeout(total=timeout),
                ) as resp:
                    if resp.status >= 400:
                        logger.warning("Webhook 응답 오류: HTTP %d", resp.status)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning("Webhook 알림 실패: %s", e)
