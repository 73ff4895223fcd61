# ABOUTME: Tests for the cancellable periodic refresh timer.
# ABOUTME: Uses short real intervals on the test event loop.

import asyncio

import pytest

from src.timer import RefreshTimer


class TestRefreshTimer:
    @pytest.mark.asyncio
    async def test_fires_repeatedly_until_cancelled(self):
        """An armed timer calls back every interval; cancel stops it.

        Implementation: Arms a 10ms timer and counts callbacks.
        Passing implies: The timer repeats and cancel() halts further calls.
        """
        calls = []

        async def tick():
            calls.append(1)

        timer = RefreshTimer(0.01, tick)
        timer.arm()
        await asyncio.sleep(0.08)
        assert timer.active
        timer.cancel()
        count = len(calls)
        await asyncio.sleep(0.05)

        assert count >= 2
        assert len(calls) == count
        assert not timer.active

    @pytest.mark.asyncio
    async def test_does_not_fire_immediately(self):
        calls = []

        async def tick():
            calls.append(1)

        timer = RefreshTimer(10, tick)
        timer.arm()
        await asyncio.sleep(0.01)
        timer.cancel()
        assert calls == []

    @pytest.mark.asyncio
    async def test_rearm_replaces_live_task(self):
        """Rearming cancels the previous instance so only one task is live.

        Implementation: Arms twice and inspects the first task.
        Passing implies: At most one timer instance runs at a time.
        """

        async def tick():
            pass

        timer = RefreshTimer(10, tick)
        timer.arm()
        first = timer._task
        timer.arm()
        await asyncio.sleep(0.01)

        assert first.cancelled()
        assert timer._task is not first
        assert timer.active
        timer.cancel()

    @pytest.mark.asyncio
    async def test_failing_callback_keeps_timer_alive(self):
        """An exception in the callback is logged and the timer keeps running.

        Implementation: Callback raises on every call.
        Passing implies: One bad refresh does not stop periodic refetching.
        """
        calls = []

        async def boom():
            calls.append(1)
            raise RuntimeError("refresh failed")

        timer = RefreshTimer(0.01, boom)
        timer.arm()
        await asyncio.sleep(0.08)
        assert timer.active
        timer.cancel()
        assert len(calls) >= 2

    def test_cancel_without_arm_is_noop(self):
        async def tick():
            pass

        timer = RefreshTimer(1, tick)
        timer.cancel()
        assert not timer.active

    @pytest.mark.asyncio
    async def test_aclose_waits_for_task(self):
        """aclose() cancels the live task and returns only once it has finished.

        Implementation: Arms a long timer, closes it, and inspects the captured task.
        Passing implies: Shutdown leaves no pending timer task behind.
        """

        async def tick():
            pass

        timer = RefreshTimer(10, tick)
        timer.arm()
        task = timer._task
        await timer.aclose()

        assert task.done()
        assert task.cancelled()
        assert not timer.active
        await timer.aclose()
