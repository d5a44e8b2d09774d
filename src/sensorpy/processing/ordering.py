"""Order and select WiFi scan results by signal strength."""

from typing import List, Optional, Sequence

import polars as pl

from sensorpy.core import config, models
from sensorpy.processing import metrics

logger = config.get_logger()


def sort_by_signal(networks: Sequence[models.WifiNetwork]) -> List[models.WifiNetwork]:
    """Order networks from strongest to weakest signal.

    The sort is stable: networks with equal signal strength keep their relative
    order. The input sequence is not modified.

    Args:
        networks: The scan results to order.

    Returns:
        A new list with the strongest network first.
    """
    if not networks:
        return []

    order = (
        pl.DataFrame(
            {
                "position": range(len(networks)),
                "signal_strength": [network.signal_strength for network in networks],
            },
            schema={"position": pl.UInt32, "signal_strength": pl.Int64},
        )
        .sort("signal_strength", descending=True, maintain_order=True)
        .get_column("position")
    )
    return [networks[position] for position in order]


def strongest(networks: Sequence[models.WifiNetwork]) -> Optional[models.WifiNetwork]:
    """Return the network with the strongest signal, or None for an empty scan."""
    ordered = sort_by_signal(networks)
    return ordered[0] if ordered else None


def filter_by_quality(
    networks: Sequence[models.WifiNetwork],
    minimum: metrics.SignalQuality = metrics.SignalQuality.FAIR,
) -> List[models.WifiNetwork]:
    """Select the networks whose signal tier is at least `minimum`.

    Args:
        networks: The scan results to filter.
        minimum: The weakest tier to keep.

    Returns:
        The matching networks, in their original order.
    """
    cutoff = metrics.SIGNAL_RANK[minimum]
    selected = [
        network
        for network in networks
        if metrics.SIGNAL_RANK[metrics.get_signal_quality(network.signal_strength)]
        <= cutoff
    ]
    logger.debug(
        "Kept %s of %s networks at %s or better.",
        len(selected),
        len(networks),
        minimum.value,
    )
    return selected
