"""
WebSwitch Client - asyncio client for WebSwitch relay/temperature controllers
"""

from .device import (
    ArgumentRangeError,
    AuthorizationRequiredError,
    ParseError,
    RequestCancelledError,
    SensorNotFoundError,
    StatusCodeError,
    TemperatureSensor,
    TemperatureSensorCollection,
    WebSwitchClient,
    WebSwitchError,
)

__all__ = [
    'WebSwitchClient', 'TemperatureSensor', 'TemperatureSensorCollection',
    'WebSwitchError', 'SensorNotFoundError', 'ParseError', 'StatusCodeError',
    'AuthorizationRequiredError', 'ArgumentRangeError', 'RequestCancelledError',
]
__version__ = "0.1.0"
