import asyncio
import logging
from collections.abc import Callable
from typing import Any, Protocol

from pydantic import ValidationError

from geotypes.core.constants import GEOCODER_STATUS_COMPLETE
from geotypes.core.errors import GeocoderError
from geotypes.schemas.geocoder import Regeocode, ReverseGeocodeResult
from geotypes.schemas.geojson import POSITION_TYPE

logger = logging.getLogger(__name__)


class Geocoder(Protocol):
    """Callback-style reverse geocoding client (e.g. a wrapped map SDK)."""

    def get_address(self, lnglat: POSITION_TYPE, callback: Callable[[str, Any], None]) -> None: ...


def _pick_address(regeocode: Regeocode) -> str:
    # most specific named place first
    for places in (regeocode.aois, regeocode.pois, regeocode.roads):
        if places:
            return places[0].name
    return regeocode.formatted_address


def _settle(future: asyncio.Future, status: str, result: Any) -> None:
    if future.done():
        return

    regeocode = None
    if status == GEOCODER_STATUS_COMPLETE:
        try:
            regeocode = ReverseGeocodeResult.model_validate(result, from_attributes=True).regeocode
        except ValidationError:
            logger.debug('Unreadable reverse geocoding result: %r', result)

    if regeocode is None:
        logger.debug('Reverse geocoding failed with status %r', status)
        future.set_exception(GeocoderError(status, result))
        return

    future.set_result(_pick_address(regeocode))


async def get_address_by_geocoder(geocoder: Geocoder, lnglat: POSITION_TYPE) -> str:
    """Resolve an address for `lnglat` through a callback-based geocoder.

    Raises GeocoderError with the raw provider response when the status is
    not 'complete' or the response has no regeocode payload. No retry or
    timeout is applied; wrap with asyncio.wait_for if needed.
    """
    loop = asyncio.get_running_loop()
    future = loop.create_future()

    def callback(status: str, result: Any) -> None:
        # the SDK may call back from its own thread
        loop.call_soon_threadsafe(_settle, future, status, result)

    geocoder.get_address(lnglat, callback)
    return await future
