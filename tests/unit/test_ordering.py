"""Test the ordering of WiFi scan results."""

from typing import List

import pytest

from sensorpy.core import models
from sensorpy.processing import metrics, ordering


def _network(ssid: str, signal_strength: int) -> models.WifiNetwork:
    return models.WifiNetwork(
        ssid=ssid,
        bssid="00:11:22:33:44:55",
        signal_strength=signal_strength,
        frequency=2412,
        security="WPA2",
    )


def test_sort_by_signal(wifi_networks: List[models.WifiNetwork]) -> None:
    """Test that the strongest network comes first."""
    result = ordering.sort_by_signal(wifi_networks)

    assert [n.ssid for n in result] == ["MyHomeWiFi", "CoffeeShop-Guest", "Neighbor_5G"]
    assert all(
        first.signal_strength >= second.signal_strength
        for first, second in zip(result, result[1:])
    )


def test_sort_by_signal_does_not_mutate(
    wifi_networks: List[models.WifiNetwork],
) -> None:
    """Test that the input order is untouched and a new list is returned."""
    original = list(wifi_networks)

    result = ordering.sort_by_signal(wifi_networks)

    assert wifi_networks == original
    assert result is not wifi_networks


def test_sort_by_signal_is_stable() -> None:
    """Test that equal signal strengths keep their scan order."""
    networks = [
        _network("first", -60),
        _network("strong", -40),
        _network("second", -60),
        _network("third", -60),
    ]

    result = ordering.sort_by_signal(networks)

    assert [n.ssid for n in result] == ["strong", "first", "second", "third"]


def test_sort_by_signal_empty() -> None:
    """Test that an empty scan gives an empty list."""
    assert ordering.sort_by_signal([]) == []


def test_sort_by_signal_accepts_tuples() -> None:
    """Test that any sequence can be ordered."""
    networks = (_network("weak", -90), _network("strong", -30))

    assert [n.ssid for n in ordering.sort_by_signal(networks)] == ["strong", "weak"]


def test_strongest(wifi_networks: List[models.WifiNetwork]) -> None:
    """Test selecting the strongest network."""
    result = ordering.strongest(wifi_networks)

    assert result is not None
    assert result.ssid == "MyHomeWiFi"


def test_strongest_empty_scan() -> None:
    """Test that an empty scan has no strongest network."""
    assert ordering.strongest([]) is None


@pytest.mark.parametrize(
    "minimum, expected",
    [
        (metrics.SignalQuality.EXCELLENT, ["MyHomeWiFi"]),
        (metrics.SignalQuality.GOOD, ["MyHomeWiFi", "CoffeeShop-Guest"]),
        (
            metrics.SignalQuality.FAIR,
            ["MyHomeWiFi", "Neighbor_5G", "CoffeeShop-Guest"],
        ),
        (
            metrics.SignalQuality.WEAK,
            ["MyHomeWiFi", "Neighbor_5G", "CoffeeShop-Guest"],
        ),
    ],
)
def test_filter_by_quality(
    wifi_networks: List[models.WifiNetwork],
    minimum: metrics.SignalQuality,
    expected: List[str],
) -> None:
    """Test that filtering keeps the scan order."""
    result = ordering.filter_by_quality(wifi_networks, minimum)

    assert [n.ssid for n in result] == expected
