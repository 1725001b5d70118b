"""Tests for report_engine/monitoring.py"""
import pytest

from report_engine.monitoring import PhaseTimer


class TestPhaseTimer:
    def test_records_phase(self):
        timer = PhaseTimer()
        with timer.phase("render"):
            pass

        assert [r.phase for r in timer.records] == ["render"]
        assert timer.records[0].duration_ms >= 0

    def test_hook_called_per_phase(self):
        calls = []
        timer = PhaseTimer(hook=lambda phase, ms: calls.append(phase))
        with timer.phase("a"):
            pass
        with timer.phase("b"):
            pass
        assert calls == ["a", "b"]

    def test_recorded_when_block_raises(self):
        timer = PhaseTimer()
        with pytest.raises(RuntimeError):
            with timer.phase("render"):
                raise RuntimeError("boom")
        assert timer.records[0].phase == "render"

    def test_totals_sum_repeated_phases(self):
        timer = PhaseTimer()
        for _ in range(3):
            with timer.phase("header-layout"):
                pass
        totals = timer.totals()
        assert list(totals) == ["header-layout"]
        assert totals["header-layout"] == pytest.approx(timer.total_ms)

    def test_timers_do_not_share_state(self):
        a, b = PhaseTimer(), PhaseTimer()
        with a.phase("x"):
            pass
        assert b.records == []
