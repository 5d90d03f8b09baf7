"""
WebSwitch device module: client, models, parsers and errors
"""

from .client import WebSwitchClient
from .exceptions import (
    ArgumentRangeError,
    AuthorizationRequiredError,
    ParseError,
    RequestCancelledError,
    SensorNotFoundError,
    StatusCodeError,
    WebSwitchError,
)
from .models import ByIndex, ByName, RelayState, SensorType, TemperatureSensor, TemperatureSensorCollection
from .result import Result, capture

__all__ = [
    'WebSwitchClient',
    'WebSwitchError', 'SensorNotFoundError', 'ParseError', 'StatusCodeError',
    'AuthorizationRequiredError', 'ArgumentRangeError', 'RequestCancelledError',
    'ByIndex', 'ByName', 'RelayState', 'SensorType', 'TemperatureSensor', 'TemperatureSensorCollection',
    'Result', 'capture',
]
