"""Unit tests for the DNS propagation wait."""

from __future__ import annotations
import pytest
from unittest.mock import Mock, patch

from azure_dns_provisioning.errors import PropagationTimeoutError
from azure_dns_provisioning.propagation import wait_fixed, wait_for_propagation


class FakeClock:
    """time replacement whose sleep advances monotonic."""

    def __init__(self):
        self.now = 0.0
        self.sleeps: list[float] = []

    def monotonic(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def fake_time():
    clock = FakeClock()
    with patch("azure_dns_provisioning.propagation.time", clock):
        yield clock


@pytest.mark.unit
@pytest.mark.dns
class TestWaitForPropagation:
    """Test poll-with-backoff propagation wait."""

    def test_returns_when_probe_succeeds(self, fake_time):
        """
        GIVEN records become visible on the third check
        WHEN wait_for_propagation is called
        THEN it should return after three probes with doubling delays
        """
        probe = Mock(side_effect=[False, False, True])

        attempts = wait_for_propagation(probe, timeout=300, initial_delay=10, max_delay=60)

        assert attempts == 3
        assert probe.call_count == 3
        assert fake_time.sleeps == [10, 20, 40]

    def test_delay_capped_at_max(self, fake_time):
        """
        GIVEN records stay invisible for several checks
        WHEN wait_for_propagation is called
        THEN the delay should never exceed max_delay
        """
        probe = Mock(side_effect=[False] * 5 + [True])

        wait_for_propagation(probe, timeout=1000, initial_delay=10, max_delay=30)

        assert fake_time.sleeps == [10, 20, 30, 30, 30, 30]

    def test_probe_never_called_before_first_delay(self, fake_time):
        """
        GIVEN an initial delay
        WHEN wait_for_propagation is called
        THEN the first probe should happen only after sleeping
        """
        observed = []
        probe = Mock(side_effect=lambda: observed.append(fake_time.now) or True)

        wait_for_propagation(probe, timeout=60, initial_delay=15, max_delay=60)

        assert observed == [15]

    def test_times_out_with_distinct_error(self, fake_time):
        """
        GIVEN records never become visible
        WHEN the timeout elapses
        THEN PropagationTimeoutError should be raised and total sleep bounded by timeout
        """
        probe = Mock(return_value=False)

        with pytest.raises(PropagationTimeoutError) as excinfo:
            wait_for_propagation(probe, timeout=100, initial_delay=10, max_delay=40)

        assert sum(fake_time.sleeps) == 100
        assert fake_time.sleeps == [10, 20, 40, 30]
        assert probe.call_count == 4
        assert "100s" in str(excinfo.value)

    def test_zero_delays_still_back_off(self, fake_time):
        """
        GIVEN initial and maximum delays of zero
        WHEN records never become visible
        THEN checks after the first should be spaced at least one second apart
        """
        probe = Mock(return_value=False)

        with pytest.raises(PropagationTimeoutError):
            wait_for_propagation(probe, timeout=3, initial_delay=0, max_delay=0)

        assert fake_time.sleeps == [0, 1, 1, 1]
        assert probe.call_count == 4

    def test_zero_timeout_never_probes(self, fake_time):
        probe = Mock(return_value=True)

        with pytest.raises(PropagationTimeoutError):
            wait_for_propagation(probe, timeout=0, initial_delay=10, max_delay=40)

        probe.assert_not_called()


@pytest.mark.unit
@pytest.mark.dns
class TestWaitFixed:
    """Test the fixed propagation interval."""

    @patch("azure_dns_provisioning.propagation.time.sleep")
    def test_sleeps_given_interval(self, mock_sleep):
        """
        GIVEN a fixed interval of 60 seconds
        WHEN wait_fixed is called
        THEN time.sleep should be called once with 60
        """
        wait_fixed(60)

        mock_sleep.assert_called_once_with(60)
