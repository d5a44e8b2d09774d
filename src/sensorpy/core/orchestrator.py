"""Python based runner."""

import logging
from typing import List, Sequence, Union

from sensorpy.core import config, exceptions, models
from sensorpy.io.writers import display
from sensorpy.processing import metrics, ordering, validation

logger = config.get_logger()


def run(
    reading: models.Reading,
    now: int,
    verbosity: int = logging.WARNING,
) -> display.DisplayStrings:
    """Runs the validation, derivation and formatting steps on a single reading.

    Args:
        reading: The raw reading, as delivered by the acquisition layer.
        now: Unix time of the moment of display in milliseconds.
        verbosity: The logging level for the logger.

    Returns:
        The display strings for the reading, keyed by field name.

    Raises:
        SensorError: InvalidValueError or OutOfRangeError if the reading fails
            validation. Nothing is rendered for a rejected reading.
    """
    logger.setLevel(verbosity)

    validated = validation.validate(reading)
    derived = metrics.derive(validated)
    strings = display.format_reading(validated, derived, now)

    logger.debug("Rendered %s.", type(reading).__name__)
    return strings


def run_scan(
    networks: Sequence[models.WifiNetwork],
    verbosity: int = logging.WARNING,
) -> List[display.DisplayStrings]:
    """Runs the processing steps on a WiFi scan, strongest network first.

    Args:
        networks: The scan results, in the order the scanner reported them.
        verbosity: The logging level for the logger.

    Returns:
        One display mapping per network, ordered by descending signal strength.
        Networks of equal strength keep their scan order.

    Raises:
        SensorError: If any network fails validation.
    """
    logger.setLevel(verbosity)

    validated = {id(network): validation.validate(network) for network in networks}
    results = []
    for network in ordering.sort_by_signal(networks):
        checked = validated[id(network)]
        results.append(display.format_reading(checked, metrics.derive(checked)))

    logger.info("Rendered %s networks.", len(results))
    return results


def render_fault(
    fault: Union[
        exceptions.SensorFault, exceptions.SensorError, exceptions.SensorErrorKind
    ],
) -> display.DisplayStrings:
    """Renders the advisory shown in place of an unavailable or failing sensor.

    Args:
        fault: The fault reported by the acquisition layer, a SensorError raised
            during validation, or a bare error kind.

    Returns:
        {"status": <advisory text>}.
    """
    return {"status": display.format_error(fault)}
