"""Custom exceptions and the sensor error taxonomy for sensorpy."""

import enum
from typing import Any, ClassVar, Optional

import pydantic

from sensorpy.core import config

logger = config.get_logger()


class SensorErrorKind(str, enum.Enum):
    """Closed set of reasons a sensor reading can be unusable."""

    NOT_AVAILABLE = "not_available"
    PERMISSION_DENIED = "permission_denied"
    HARDWARE_ERROR = "hardware_error"
    INVALID_VALUE = "invalid_value"
    OUT_OF_RANGE = "out_of_range"


class SensorFault(pydantic.BaseModel):
    """Structured description of an unavailable or failing sensor.

    The acquisition layer hands these over instead of a reading; the display layer
    turns them into advisory text.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    kind: SensorErrorKind
    detail: str = ""
    field: Optional[str] = None


class LoggedException(Exception):
    """Base class that automatically logs messages."""

    def __init__(self, message: str) -> None:
        """Initialize a new instance of the LoggedException class.

        Args:
            message: The message to display.
        """
        logger.error(message)
        super().__init__(message)


class SensorError(LoggedException):
    """A sensor reading could not be used.

    Attributes:
        kind: The error kind, fixed per subclass.
        detail: Human-readable description of the failure.
        field: Name of the offending field, if the error concerns a single field.
        value: The offending value, if any.
    """

    kind: ClassVar[SensorErrorKind]

    def __init__(
        self,
        detail: str,
        field: Optional[str] = None,
        value: Any = None,
    ) -> None:
        """Initialize a new sensor error.

        Args:
            detail: Human-readable description of the failure.
            field: Name of the offending field.
            value: The offending value.
        """
        self.detail = detail
        self.field = field
        self.value = value
        super().__init__(detail)

    def to_fault(self) -> SensorFault:
        """Converts the exception into its structured payload."""
        return SensorFault(kind=self.kind, detail=self.detail, field=self.field)


class NotAvailableError(SensorError):
    """The sensor is absent on the reporting device."""

    kind = SensorErrorKind.NOT_AVAILABLE


class PermissionDeniedError(SensorError):
    """Access to the sensor was refused."""

    kind = SensorErrorKind.PERMISSION_DENIED


class HardwareError(SensorError):
    """The sensor hardware reported a failure."""

    kind = SensorErrorKind.HARDWARE_ERROR


class InvalidValueError(SensorError):
    """The reading is structurally impossible, e.g. NaN or a malformed identifier."""

    kind = SensorErrorKind.INVALID_VALUE


class OutOfRangeError(SensorError):
    """The reading lies outside the physically plausible bounds."""

    kind = SensorErrorKind.OUT_OF_RANGE


ERRORS_BY_KIND = {
    error.kind: error
    for error in (
        NotAvailableError,
        PermissionDeniedError,
        HardwareError,
        InvalidValueError,
        OutOfRangeError,
    )
}

