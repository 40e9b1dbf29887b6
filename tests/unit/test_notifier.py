"""NotifierSkill 단위 테스트"""

from __future__ import annotations

import logging
from unittest.mock import AsyncMock, patch

import pytest

from railbook.models.booking import Booking
from railbook.skills.catalog import get_train
from railbook.skills.notifier import NotificationPayload, NotifierSkill, build_payload

BOOKING = Booking(12, "Ann Lee", 30, "Female", 1, "AC")


class TestNotifierSkill:
    @pytest.mark.asyncio
    async def test_no_methods_is_noop(self) -> None:
        notifier = NotifierSkill()
        with patch.object(
            NotifierSkill, "_desktop_notify", new_callable=AsyncMock
        ) as mock_desktop:
            await notifier.send(BOOKING, get_train(1))
            mock_desktop.assert_not_called()

    @pytest.mark.asyncio
    async def test_desktop_method_registered(self) -> None:
        notifier = NotifierSkill(methods=["desktop"])
        with patch.object(
            NotifierSkill, "_desktop_notify", new_callable=AsyncMock
        ) as mock_desktop:
            await notifier.send(BOOKING, get_train(1))
            mock_desktop.assert_called_once()
            payload = mock_desktop.call_args.args[0]
            assert payload.booking_id == 12

    @pytest.mark.asyncio
    async def test_channel_failure_isolated(self) -> None:
        notifier = NotifierSkill(methods=["desktop", "sound"])
        with patch.object(
            NotifierSkill, "_desktop_notify",
            new_callable=AsyncMock, side_effect=FileNotFoundError("notify-send"),
        ), patch.object(
            NotifierSkill, "_sound_notify", new_callable=AsyncMock
        ) as mock_sound:
            await notifier.send(BOOKING, get_train(1))
            mock_sound.assert_called_once()

    @pytest.mark.asyncio
    async def test_webhook_skipped_without_url(self) -> None:
        notifier = NotifierSkill(methods=["webhook"], webhook_url="")
        # URL이 없으면 HTTP 요청 없이 종료
        await notifier.send(BOOKING, get_train(1))

    @pytest.mark.asyncio
    async def test_unknown_method_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        notifier = NotifierSkill(methods=["pager"])
        with caplog.at_level(logging.WARNING, logger="railbook.skill.notifier"):
            await notifier.send(BOOKING, get_train(1))
        assert "pager" in caplog.text


class TestNotificationPayload:
    def test_build_payload(self) -> None:
        p = build_payload(BOOKING, get_train(1))
        assert isinstance(p, NotificationPayload)
        assert p.title == "예약 완료 #12"
        assert "Ann Lee" in p.message
        assert "Express A" in p.message
