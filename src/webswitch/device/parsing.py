"""
Parsers for WebSwitch plain-text responses

The device answers every GET with a short text body:
  - single temperature:  "23.5"  or the sentinel "X"
  - bulk temperatures:   one "index,value" or "index,X" line per sensor
  - relay control:       "|000|OK|1|" acknowledgment
  - relay state:         "|"-delimited fields, the last one "1" (on) or "0" (off)

Numbers always use a period decimal separator, independent of host locale.
"""

import logging
import re
from typing import List, Optional, Tuple

from .exceptions import ParseError, SensorNotFoundError, StatusCodeError
from .models import ByIndex, SensorId, TemperatureSensor, TemperatureSensorCollection

logger = logging.getLogger(__name__)

SENSOR_NOT_FOUND_VALUE = "X"
FAILED_READING_SUFFIX = f",{SENSOR_NOT_FOUND_VALUE}"
RELAY_ACK = "|000|OK|1|"
RELAY_ON_VALUE = "1"

# float() alone would also accept "nan", "inf" and "1_000"
_DECIMAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_INDEX_RE = re.compile(r"^[0-9]+$")


def parse_decimal(text: str) -> Optional[float]:
    """Parse an invariant-culture decimal, returning None if it isn't one"""
    text = text.strip()
    if not _DECIMAL_RE.match(text):
        return None
    return float(text)


def parse_temperature(body: str, sensor: SensorId) -> float:
    """
    Decode a single-sensor temperature body.
    Raises SensorNotFoundError on the "X" sentinel and ParseError otherwise.
    """
    text = body.strip()
    if text == SENSOR_NOT_FOUND_VALUE:
        raise SensorNotFoundError(sensor.index if isinstance(sensor, ByIndex) else sensor.name)

    value = parse_decimal(text)
    if value is None:
        raise ParseError(text)
    return value


def _parse_index(text: str, line: str) -> int:
    text = text.strip()
    if not _INDEX_RE.match(text):
        raise ParseError(line, f'Failed to parse the sensor index in "{line}"')
    return int(text)


def _parse_failed_line(line: str) -> int:
    return _parse_index(line[:-len(FAILED_READING_SUFFIX)], line)


def _parse_reading_line(line: str) -> Tuple[int, float]:
    parts = line.split(",")
    if len(parts) < 2:
        raise ParseError(line, f'Failed to parse the temperature line "{line}"')
    index = _parse_index(parts[0], line)
    value = parse_decimal(parts[1])
    if value is None:
        raise ParseError(line)
    return index, value


def parse_temperatures(body: str) -> TemperatureSensorCollection:
    """
    Decode a bulk temperature body into a collection.
    Sentinel lines are recorded as failed indices, never raised. An index
    reported both as a reading and as failed counts as read.
    """
    readings: List[TemperatureSensor] = []
    failed: List[int] = []

    for raw_line in body.split("\n"):
        line = raw_line.strip()
        if not line:
            continue
        if line.endswith(FAILED_READING_SUFFIX):
            failed.append(_parse_failed_line(line))
        else:
            index, value = _parse_reading_line(line)
            readings.append(TemperatureSensor(ByIndex(index), value))

    read_indices = {s.index for s in readings}
    colliding = [i for i in failed if i in read_indices]
    if colliding:
        logger.warning(f"Sensors {colliding} reported both a reading and a failure; keeping the readings")
        failed = [i for i in failed if i not in read_indices]

    return TemperatureSensorCollection(readings, failed)


def parse_relay_ack(body: str) -> bool:
    """Check a relay control acknowledgment; anything else is a StatusCodeError"""
    text = body.strip()
    if text != RELAY_ACK:
        raise StatusCodeError(body=text)
    return True


def parse_relay_state(body: str) -> bool:
    """Return True when the last "|"-delimited field is "1" """
    segments = [s.strip() for s in body.split("|")]
    segments = [s for s in segments if s]
    if not segments:
        raise ParseError(body, f'Failed to parse the relay state "{body}"')
    return segments[-1] == RELAY_ON_VALUE
