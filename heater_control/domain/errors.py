class HeaterControlError(Exception):
    """Base class for errors raised by the heater control core."""


class CaptureFailure(HeaterControlError):
    """The capture process failed, exited abnormally or timed out."""


class DecodeFailure(HeaterControlError):
    """Captured bytes could not be turned into an image of the expected size."""


class HardwareUnavailable(HeaterControlError):
    """The heater output pin could not be claimed."""


class CalibrationError(HeaterControlError, ValueError):
    """Lamp regions or thresholds are unusable for the configured image."""
