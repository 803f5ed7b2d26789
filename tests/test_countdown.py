"""Tests for vegam.core.countdown – polled countdown."""

from __future__ import annotations

import pytest

from vegam.core.countdown import Countdown, remaining_seconds


# ---------------------------------------------------------------------------
# remaining_seconds
# ---------------------------------------------------------------------------

class TestRemainingSeconds:
    def test_at_start(self):
        assert remaining_seconds(10.0, 10.0, 30) == 30.0

    def test_midway(self):
        assert remaining_seconds(10.0, 22.5, 30) == pytest.approx(17.5)

    def test_exactly_done(self):
        assert remaining_seconds(10.0, 40.0, 30) == 0.0

    def test_never_negative(self):
        assert remaining_seconds(10.0, 500.0, 30) == 0.0


# ---------------------------------------------------------------------------
# Countdown
# ---------------------------------------------------------------------------

class TestCountdownIdle:
    def test_not_active_before_start(self, clock):
        cd = Countdown(30, clock=clock)
        assert not cd.is_active
        assert not cd.is_expired
        assert cd.started_at is None

    def test_poll_before_start_returns_full_duration(self, clock):
        cd = Countdown(30, clock=clock)
        clock.advance(100)
        assert cd.poll() == 30.0

    def test_set_duration_while_idle(self, clock):
        cd = Countdown(30, clock=clock)
        assert cd.set_duration(60) is True
        assert cd.duration == 60.0
        assert cd.remaining == 60.0


class TestCountdownRunning:
    def test_start_uses_clock(self, clock):
        cd = Countdown(30, clock=clock)
        cd.start()
        assert cd.started_at == clock.now
        assert cd.is_active

    def test_start_with_explicit_time_and_duration(self, clock):
        cd = Countdown(30, clock=clock)
        cd.start(15, now=5.0)
        assert cd.duration == 15.0
        assert cd.poll(now=10.0) == pytest.approx(10.0)

    def test_poll_counts_down(self, clock):
        cd = Countdown(30, clock=clock)
        cd.start()
        clock.advance(12.25)
        assert cd.poll() == pytest.approx(17.75)
        assert cd.remaining == pytest.approx(17.75)

    def test_set_duration_refused_while_active(self, clock):
        cd = Countdown(30, clock=clock)
        cd.start()
        assert cd.set_duration(120) is False
        assert cd.duration == 30.0


class TestCountdownExpiry:
    def test_expires_at_zero(self, clock):
        cd = Countdown(15, clock=clock)
        cd.start()
        clock.advance(15)
        assert cd.poll() == 0.0
        assert cd.is_expired
        assert not cd.is_active

    def test_callback_fires_once(self, clock):
        calls = []
        cd = Countdown(15, clock=clock, on_expired=lambda: calls.append(clock.now))
        cd.start()
        clock.advance(20)
        cd.poll()
        cd.poll()
        clock.advance(5)
        cd.poll()
        assert len(calls) == 1

    def test_callback_not_fired_early(self, clock):
        calls = []
        cd = Countdown(15, clock=clock, on_expired=lambda: calls.append(True))
        cd.start()
        clock.advance(14.99)
        cd.poll()
        assert calls == []

    def test_polls_after_expiry_stay_zero(self, clock):
        cd = Countdown(15, clock=clock)
        cd.start()
        clock.advance(16)
        cd.poll()
        clock.advance(100)
        assert cd.poll() == 0.0


class TestCountdownCancel:
    def test_cancel_rewinds(self, clock):
        cd = Countdown(30, clock=clock)
        cd.start()
        clock.advance(10)
        cd.poll()
        cd.cancel()
        assert not cd.is_active
        assert cd.remaining == 30.0
        assert cd.started_at is None

    def test_cancel_after_expiry_allows_restart(self, clock):
        calls = []
        cd = Countdown(15, clock=clock, on_expired=lambda: calls.append(True))
        cd.start()
        clock.advance(15)
        cd.poll()
        cd.cancel()
        assert not cd.is_expired
        cd.start()
        clock.advance(15)
        cd.poll()
        assert len(calls) == 2
