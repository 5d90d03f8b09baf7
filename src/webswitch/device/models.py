"""
WebSwitch data structures and models
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union


class SensorType(Enum):
    """Endpoint families exposed by the device"""
    TEMPERATURE = "temperature/"
    RELAYS = "relaycontrol/"
    RELAY_STATE = "relaystate/"
    DIGITAL = "input/"


@dataclass(frozen=True)
class ByIndex:
    """Sensor addressed by its numeric index on the device"""
    index: int

    def __str__(self) -> str:
        return str(self.index)


@dataclass(frozen=True)
class ByName:
    """Sensor addressed by its configured name (e.g. "FL")"""
    name: str

    def __str__(self) -> str:
        return self.name


SensorId = Union[ByIndex, ByName]


def sensor_id_for(sensor: Union[int, str]) -> SensorId:
    """Wrap a raw index or name in the matching SensorId variant"""
    if isinstance(sensor, bool):
        raise TypeError("sensor must be an int index or a str name, not bool")
    if isinstance(sensor, int):
        return ByIndex(sensor)
    if isinstance(sensor, str):
        return ByName(sensor)
    raise TypeError(f"sensor must be an int index or a str name, not {type(sensor).__name__}")


@dataclass(frozen=True)
class TemperatureSensor:
    """A single temperature reading"""
    sensor_id: SensorId
    value: float

    @property
    def index(self) -> Optional[int]:
        return self.sensor_id.index if isinstance(self.sensor_id, ByIndex) else None

    @property
    def name(self) -> Optional[str]:
        return self.sensor_id.name if isinstance(self.sensor_id, ByName) else None

    def __str__(self) -> str:
        index = self.index if self.index is not None else "N/A"
        return f"Name: {self.name or 'N/A'}, Sensor index: {index}, Value: {self.value}"


class TemperatureSensorCollection(list):
    """
    Readings from one bulk request, in response order.
    failed_indices lists the requested sensors the device could not read.
    """

    def __init__(self, sensors=(), failed_indices: Optional[List[int]] = None):
        super().__init__(sensors)
        self.failed_indices: List[int] = list(failed_indices) if failed_indices else []

    @property
    def has_failures(self) -> bool:
        return bool(self.failed_indices)

    def by_index(self, index: int) -> List[TemperatureSensor]:
        return [s for s in self if s.index == index]

    def by_name(self, name: str) -> List[TemperatureSensor]:
        return [s for s in self if s.name == name]

    def failed_indices_csv(self) -> str:
        return ",".join(str(i) for i in self.failed_indices)

    def __repr__(self) -> str:
        return f"TemperatureSensorCollection({list.__repr__(self)}, failed_indices={self.failed_indices!r})"


@dataclass(frozen=True)
class RelayState:
    """State of one relay at the time it was queried"""
    index: int
    is_on: bool
