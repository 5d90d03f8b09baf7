"""
Exceptions raised by the WebSwitch device client
"""

from typing import Optional, Union


class WebSwitchError(Exception):
    """Base exception for WebSwitch client errors"""

    pass


class SensorNotFoundError(WebSwitchError):
    """Device answered with the not-found sentinel for a single sensor lookup"""

    def __init__(self, sensor: Union[int, str]):
        self.sensor = sensor
        kind = "name" if isinstance(sensor, str) else "index"
        super().__init__(f"Failed to find any sensor with {kind} {sensor}")


class ParseError(WebSwitchError):
    """Response body could not be parsed into the expected value"""

    def __init__(self, raw_text: str, message: Optional[str] = None):
        self.raw_text = raw_text
        super().__init__(message or f'Failed to parse the temperature "{raw_text}"')


class StatusCodeError(WebSwitchError):
    """Unexpected HTTP status, or an unexpected acknowledgment body"""

    def __init__(self, status: Optional[int] = None, body: Optional[str] = None):
        self.status = status
        self.body = body
        if body is not None:
            message = f'Got unexpected response "{body}"'
        else:
            message = f"Got unexpected status code {status}"
        super().__init__(message)


class AuthorizationRequiredError(StatusCodeError):
    """Device rejected the request with HTTP 401"""

    def __init__(self, status: int = 401):
        super().__init__(status=status)
        self.args = (f"Authorization required (status code {status})",)


class ArgumentRangeError(WebSwitchError, ValueError):
    """Argument outside the range the device accepts"""

    def __init__(self, name: str, value: int, minimum: int, maximum: int):
        self.name = name
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(f"{name} must be between {minimum} and {maximum}, got {value}")


class RequestCancelledError(WebSwitchError):
    """Operation was cancelled through its cancel event"""

    pass
