"""
Tests for the change gate.
"""

from datetime import datetime, timedelta, timezone

import pytest

from adventleader.ingestion.timecodec import ZERO_TIMESTAMP
from adventleader.notify.gate import should_notify

T0 = datetime(2018, 12, 1, 6, 0, tzinfo=timezone.utc)


class TestShouldNotify:
    """Tests for should_notify."""

    def test_newer_star_notifies(self):
        assert should_notify(T0 + timedelta(seconds=1), T0, debug=False)

    def test_equal_time_does_not_notify(self):
        assert not should_notify(T0, T0, debug=False)

    def test_older_star_does_not_notify(self):
        assert not should_notify(T0 - timedelta(minutes=5), T0, debug=False)

    def test_zero_sentinel_does_not_notify(self):
        assert not should_notify(ZERO_TIMESTAMP, T0, debug=False)

    def test_epoch_last_notified_and_real_star(self):
        epoch = datetime(1970, 1, 1, tzinfo=timezone.utc)
        assert should_notify(T0, epoch, debug=False)

    @pytest.mark.parametrize("max_last_star", [ZERO_TIMESTAMP, T0 - timedelta(days=1), T0, T0 + timedelta(days=1)])
    def test_debug_always_notifies(self, max_last_star):
        assert should_notify(max_last_star, T0, debug=True)

    def test_compares_across_offsets(self):
        plus_one = timezone(timedelta(hours=1))
        # 07:00+01:00 is the same instant as T0
        assert not should_notify(datetime(2018, 12, 1, 7, 0, tzinfo=plus_one), T0)
        assert should_notify(datetime(2018, 12, 1, 7, 1, tzinfo=plus_one), T0)
