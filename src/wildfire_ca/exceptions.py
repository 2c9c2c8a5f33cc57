"""Exceptions raised by the wildfire simulation engine."""

from typing import Any, Optional


class SimulationError(Exception):
    """Base exception for all simulation errors.

    Catching this class catches every error the engine raises.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """
        super().__init__(message)
        self.details = details or {}


class InvalidParameterError(SimulationError, ValueError):
    """Raised when the engine is given a value it does not recognise.

    This includes:
    - Unknown humidity level
    - Unknown terrain type
    - Non-positive grid dimensions
    """

    def __init__(self, parameter: str, value: Any, message: Optional[str] = None):
        if message is None:
            message = f"unrecognised value {value!r}"
        super().__init__(
            f"Invalid parameter '{parameter}': {message}",
            details={"parameter": parameter, "value": value},
        )
        self.parameter = parameter
        self.value = value


class OutOfBoundsError(SimulationError, IndexError):
    """Raised when a coordinate falls outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(
            f"Cell ({x}, {y}) is outside the {width}x{height} grid",
            details={"x": x, "y": y, "width": width, "height": height},
        )
        self.x = x
        self.y = y
        self.width = width
        self.height = height
