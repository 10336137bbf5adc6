"""Tests for the manual scheduler and the single-shot Timer."""
import pytest

from qtimer.timer import Timer


class TestManualScheduler:
    def test_callbacks_wait_for_the_clock(self, scheduler):
        fired = []
        scheduler.call_later(1.0, fired.append, 'a')
        assert scheduler.advance(0.5) == 0
        assert fired == []
        assert scheduler.advance(0.5) == 1
        assert fired == ['a']
        assert scheduler.now() == 1.0

    def test_due_order_then_schedule_order(self, scheduler):
        fired = []
        scheduler.call_later(2, fired.append, 'late')
        scheduler.call_later(1, fired.append, 'first')
        scheduler.call_later(1, fired.append, 'second')
        scheduler.advance(5)
        assert fired == ['first', 'second', 'late']

    def test_cancelled_callbacks_never_run(self, scheduler):
        fired = []
        handle = scheduler.call_later(1, fired.append, 'x')
        assert scheduler.pending() == 1
        scheduler.cancel(handle)
        assert scheduler.pending() == 0
        scheduler.advance(10)
        assert fired == []

    def test_zero_delay_runs_on_next_pass(self, scheduler):
        fired = []
        scheduler.call_later(0, fired.append, 'now')
        assert fired == []
        assert scheduler.run_pending() == 1
        assert fired == ['now']

    def test_callbacks_scheduled_while_advancing_can_run(self, scheduler):
        fired = []

        def chain():
            fired.append(scheduler.now())
            scheduler.call_later(1, fired.append, 'chained')

        scheduler.call_later(1, chain)
        scheduler.advance(3)
        assert fired == [1, 'chained']


    def test_raising_callback_still_moves_clock_to_target(self, scheduler):
        fired = []

        def broken():
            raise RuntimeError("boom")

        scheduler.call_later(1, broken)
        scheduler.call_later(1, fired.append, 'other')
        with pytest.raises(RuntimeError):
            scheduler.advance(2)
        assert scheduler.now() == 2
        assert fired == []
        assert scheduler.run_pending() == 1
        assert fired == ['other']

class TestTimer:
    def test_fires_once(self, scheduler):
        fired = []
        timer = Timer(scheduler, lambda: fired.append(timer.active))
        timer.start(2)
        assert timer.active
        scheduler.advance(2)
        # handle is cleared before the callback runs
        assert fired == [False]
        scheduler.advance(10)
        assert fired == [False]

    def test_stop_prevents_expiry(self, scheduler):
        fired = []
        timer = Timer(scheduler, lambda: fired.append(1))
        timer.start(1)
        timer.stop()
        assert not timer.active
        scheduler.advance(5)
        assert fired == []

    def test_stale_token_is_ignored(self, scheduler):
        fired = []
        timer = Timer(scheduler, lambda: fired.append(1))
        timer.start(1)
        timer.timeout(timer.token - 1)
        assert fired == []
        assert timer.active

    def test_remaining(self, scheduler):
        timer = Timer(scheduler, lambda: None)
        assert timer.remaining() is None
        timer.start(3)
        scheduler.advance(1)
        assert timer.remaining() == 2
        timer.stop()
        assert timer.remaining() is None
