"""
WebSwitch device client
Issues plain-text GET requests against a WebSwitch controller and decodes
the responses into typed values or typed errors.
Reference: https://www.webswitch.se/wp/?page_id=342
"""

import asyncio
import logging
from functools import partial
from typing import Callable, Dict, Optional, Sequence, Tuple, Union

import aiohttp
from aiohttp import hdrs

from ..http_helper import create_webswitch_session
from .exceptions import (
    ArgumentRangeError,
    AuthorizationRequiredError,
    RequestCancelledError,
    StatusCodeError,
)
from .models import RelayState, SensorType, TemperatureSensor, TemperatureSensorCollection, sensor_id_for
from .parsing import parse_relay_ack, parse_relay_state, parse_temperature, parse_temperatures

logger = logging.getLogger(__name__)

MIN_RELAY_INDEX = 1
MAX_RELAY_INDEX = 5
BULK_INDEX_SEPARATOR = "$"

SessionFactory = Callable[[], aiohttp.ClientSession]


class WebSwitchClient:
    """
    Client for a single WebSwitch controller.

    Immutable once constructed and safe to share between concurrent tasks:
    every operation opens its own session from the session factory, performs
    one GET and closes it again. No retries, no caching.

    Every operation takes an optional cancel_event. It is checked once, right
    after the response body has been read; setting it does not abort a
    request that is already in flight, it only stops the result from being
    returned (RequestCancelledError is raised instead).
    """

    __slots__ = ("_base_url", "_username", "_password", "_auth_header", "_session_factory")

    def __init__(
        self,
        base_url: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        session_factory: Optional[SessionFactory] = None,
        timeout_seconds: float = 5,
    ):
        if not base_url:
            raise ValueError("base_url is required")
        if (username is None) != (password is None):
            raise ValueError("username and password must be given together")

        self._base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._username = username
        self._password = password
        self._auth_header: Optional[str] = None

        if username is not None:
            try:
                self._auth_header = aiohttp.BasicAuth(username, password, encoding="ascii").encode()
            except UnicodeEncodeError as e:
                raise ValueError("credentials must be ASCII") from e

        self._session_factory = session_factory or partial(create_webswitch_session, timeout_seconds)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def username(self) -> Optional[str]:
        return self._username

    @property
    def password(self) -> Optional[str]:
        return self._password

    @property
    def authentication_needed(self) -> bool:
        return self._auth_header is not None

    def __repr__(self) -> str:
        return f"WebSwitchClient(base_url={self._base_url!r}, username={self._username!r})"

    # ================== 1-Wire temperature sensors ==================

    async def get_temperature(
        self, sensor: Union[int, str], cancel_event: Optional[asyncio.Event] = None
    ) -> float:
        """
        Return the temperature of one sensor, addressed by index or name.
        GET <base>temperature/get2/{sensor}

        Raises SensorNotFoundError, ParseError or StatusCodeError.
        """
        sensor_id = sensor_id_for(sensor)
        url = self._url(SensorType.TEMPERATURE, "get2", str(sensor_id))

        status, body = await self._get(url, cancel_event)
        self._ensure_success(status, url)
        return parse_temperature(body, sensor_id)

    async def get_temperature_sensor(
        self, sensor: Union[int, str], cancel_event: Optional[asyncio.Event] = None
    ) -> TemperatureSensor:
        """Same as get_temperature, returning the reading with its identifier"""
        value = await self.get_temperature(sensor, cancel_event)
        return TemperatureSensor(sensor_id_for(sensor), value)

    async def get_temperatures(
        self, indices: Sequence[int], cancel_event: Optional[asyncio.Event] = None
    ) -> TemperatureSensorCollection:
        """
        Read several sensors in one request.
        GET <base>temperature/get2/{i1}${i2}$...

        Sensors the device cannot read end up in failed_indices of the
        returned collection; only a non-success status raises.
        """
        if not indices:
            raise ValueError("at least one sensor index is required")
        segment = BULK_INDEX_SEPARATOR.join(str(i) for i in indices)
        url = self._url(SensorType.TEMPERATURE, "get2", segment)

        status, body = await self._get(url, cancel_event)
        self._ensure_success(status, url)

        collection = parse_temperatures(body)
        logger.debug(
            f"Read {len(collection)} of {len(indices)} sensors from {self._base_url}"
            f" (failed: {collection.failed_indices_csv() or 'none'})"
        )
        return collection

    # ================== Relays ==================

    async def set_relay(
        self, relay_index: int, state: bool, cancel_event: Optional[asyncio.Event] = None
    ) -> bool:
        """
        Switch a relay on or off.
        GET <base>relaycontrol/{on|off}/{relay_index}

        Raises ArgumentRangeError before any request for an invalid index,
        AuthorizationRequiredError on HTTP 401 and StatusCodeError for any
        other failure status or an unexpected acknowledgment.
        """
        self._check_relay_index(relay_index)
        url = self._url(SensorType.RELAYS, "on" if state else "off", str(relay_index))

        status, body = await self._get(url, cancel_event)
        self._ensure_success(status, url, authorization_aware=True)
        parse_relay_ack(body)
        logger.info(f"Relay {relay_index} switched {'on' if state else 'off'} on {self._base_url}")
        return True

    async def get_relay_state(
        self, relay_index: int, cancel_event: Optional[asyncio.Event] = None
    ) -> bool:
        """
        Return True if the relay is on.
        GET <base>relaystate/get/{relay_index}
        """
        self._check_relay_index(relay_index)
        url = self._url(SensorType.RELAY_STATE, "get", str(relay_index))

        status, body = await self._get(url, cancel_event)
        self._ensure_success(status, url, authorization_aware=True)
        return parse_relay_state(body)

    async def get_relay(
        self, relay_index: int, cancel_event: Optional[asyncio.Event] = None
    ) -> RelayState:
        is_on = await self.get_relay_state(relay_index, cancel_event)
        return RelayState(index=relay_index, is_on=is_on)

    # ================== Helpers ==================

    def _url(self, sensor_type: SensorType, *segments: str) -> str:
        return self._base_url + sensor_type.value + "/".join(segments)

    def _headers(self) -> Dict[str, str]:
        if self._auth_header is None:
            return {}
        return {hdrs.AUTHORIZATION: self._auth_header}

    @staticmethod
    def _check_relay_index(relay_index: int) -> None:
        if isinstance(relay_index, bool) or not isinstance(relay_index, int):
            raise TypeError(f"relay_index must be an int, not {type(relay_index).__name__}")
        if not MIN_RELAY_INDEX <= relay_index <= MAX_RELAY_INDEX:
            raise ArgumentRangeError("relay_index", relay_index, MIN_RELAY_INDEX, MAX_RELAY_INDEX)

    @staticmethod
    def _raise_if_cancelled(cancel_event: Optional[asyncio.Event]) -> None:
        if cancel_event is not None and cancel_event.is_set():
            raise RequestCancelledError("Operation was cancelled")

    async def _get(self, url: str, cancel_event: Optional[asyncio.Event]) -> Tuple[int, str]:
        """Perform one GET with a fresh session and return (status, body)"""
        logger.debug(f"GET {url}")
        try:
            async with self._session_factory() as session:
                async with session.get(url, headers=self._headers()) as response:
                    status = response.status
                    body = await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Request to {url} failed: {e}")
            raise

        # Checked only once the round trip is complete
        self._raise_if_cancelled(cancel_event)
        return status, body

    @staticmethod
    def _ensure_success(status: int, url: str, authorization_aware: bool = False) -> None:
        if 200 <= status < 300:
            return
        logger.warning(f"Unexpected status code {status} from {url}")
        if authorization_aware and status == 401:
            raise AuthorizationRequiredError(status)
        raise StatusCodeError(status=status)
