"""Tests for sensor models and the result wrapper."""

from __future__ import annotations

import pytest

from webswitch.device.exceptions import SensorNotFoundError, WebSwitchError
from webswitch.device.models import (
    ByIndex,
    ByName,
    SensorType,
    TemperatureSensor,
    TemperatureSensorCollection,
    sensor_id_for,
)
from webswitch.device.result import Result, capture


def test_sensor_id_for():
    assert sensor_id_for(3) == ByIndex(3)
    assert sensor_id_for("FL") == ByName("FL")
    with pytest.raises(TypeError):
        sensor_id_for(False)
    with pytest.raises(TypeError):
        sensor_id_for(1.5)


def test_temperature_sensor_str():
    assert str(TemperatureSensor(ByIndex(2), 20.5)) == "Name: N/A, Sensor index: 2, Value: 20.5"
    assert str(TemperatureSensor(ByName("FL"), 41.0)) == "Name: FL, Sensor index: N/A, Value: 41.0"


def test_temperature_sensor_is_frozen():
    sensor = TemperatureSensor(ByIndex(1), 20.0)
    with pytest.raises(AttributeError):
        sensor.value = 21.0


def test_collection_defaults_to_no_failures():
    collection = TemperatureSensorCollection()
    assert collection.failed_indices == []
    assert collection.failed_indices_csv() == ""
    assert not collection.has_failures


def test_collection_lookup():
    collection = TemperatureSensorCollection(
        [TemperatureSensor(ByIndex(1), 20.0), TemperatureSensor(ByName("FL"), 40.0), TemperatureSensor(ByIndex(1), 20.5)],
        failed_indices=[2, 3],
    )

    assert [s.value for s in collection.by_index(1)] == [20.0, 20.5]
    assert [s.value for s in collection.by_name("FL")] == [40.0]
    assert collection.by_index(9) == []
    assert collection.failed_indices_csv() == "2,3"
    assert collection.has_failures


def test_sensor_type_paths():
    assert SensorType.TEMPERATURE.value == "temperature/"
    assert SensorType.RELAYS.value == "relaycontrol/"
    assert SensorType.RELAY_STATE.value == "relaystate/"
    assert SensorType.DIGITAL.value == "input/"


@pytest.mark.asyncio
async def test_capture_value():
    async def read():
        return 23.5

    result = await capture(read())
    assert result.ok
    assert result.unwrap() == 23.5


@pytest.mark.asyncio
async def test_capture_error_kind():
    async def read():
        raise SensorNotFoundError(5)

    result = await capture(read())
    assert not result.ok
    assert isinstance(result.error, SensorNotFoundError)
    with pytest.raises(SensorNotFoundError):
        result.unwrap()


@pytest.mark.asyncio
async def test_capture_lets_other_errors_through():
    async def read():
        raise OSError("network down")

    with pytest.raises(OSError):
        await capture(read())


def test_result_defaults():
    assert Result(value=None).ok
    assert not Result(error=WebSwitchError("boom")).ok
