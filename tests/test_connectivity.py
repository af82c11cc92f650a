import pytest

from safety_client.connectivity import ConnectivityMonitor, PlatformEventBus
from safety_client.models import ConnectivityState


@pytest.fixture
def platform():
    return PlatformEventBus(online=True)


@pytest.fixture
def monitor(platform):
    monitor = ConnectivityMonitor(platform)
    monitor.start()
    yield monitor
    monitor.stop()


def test_initial_state_read_from_platform():
    monitor = ConnectivityMonitor(PlatformEventBus(online=False))
    monitor.start()

    assert monitor.state is ConnectivityState.OFFLINE
    assert monitor.flag.get() is False


def test_offline_then_online_publishes_false_then_true(monitor, platform):
    seen = []
    monitor.flag.subscribe(seen.append)

    platform.emit("offline")
    platform.emit("online")

    assert seen == [False, True]
    assert monitor.flag.get() is True


def test_repeated_event_is_not_republished(monitor, platform):
    seen = []
    monitor.flag.subscribe(seen.append)

    platform.emit("offline")
    platform.emit("offline")

    assert seen == [False]
    assert monitor.state is ConnectivityState.OFFLINE


def test_stop_detaches_from_platform(monitor, platform):
    monitor.stop()

    platform.emit("offline")

    assert monitor.flag.get() is True


def test_flag_view_cannot_be_written(monitor):
    assert not hasattr(monitor.flag, "set")


def test_unknown_platform_event_rejected(platform):
    with pytest.raises(ValueError):
        platform.emit("flaky")


def test_flag_reflects_platform_before_start():
    monitor = ConnectivityMonitor(PlatformEventBus(online=False))

    assert monitor.state is ConnectivityState.OFFLINE
    assert monitor.flag.get() is False
