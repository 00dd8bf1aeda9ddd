# ABOUTME: Turns a 3-hour-interval forecast response into one DailyAggregate per calendar day.
# ABOUTME: Handles parsing, status codes, location extraction, and the running high/low walk.

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from http import HTTPStatus

from pydantic import TypeAdapter, ValidationError

from src.config import DAY_END_MARKER
from src.date_utils import DAY, start_of_day_utc, utc_now
from src.errors import MalformedResponse
from src.location_store import LocationSink
from src.models import City, DailyAggregate, Location, RawForecastEntry

logger = logging.getLogger(__name__)

_status_code = TypeAdapter(int)


@dataclass
class RunningExtremes:
    """High/low temperature seen since the last flushed day. None means unset."""

    high: float | None = None
    low: float | None = None

    def update(self, slot_max: float, slot_min: float) -> None:
        if self.high is None or slot_max > self.high:
            self.high = slot_max
        if self.low is None or slot_min < self.low:
            self.low = slot_min

    def reset(self) -> None:
        self.high = None
        self.low = None


def is_last_slot_of_day(dt_txt: str, marker: str = DAY_END_MARKER) -> bool:
    """Whether a slot's timestamp text marks the final 3-hour slot of its day."""
    return marker.lower() in dt_txt.lower()


def parse_response(raw_response: str | bytes) -> dict:
    """Decode the raw response body into a JSON object."""
    try:
        document = json.loads(raw_response)
    except (json.JSONDecodeError, UnicodeDecodeError, TypeError) as e:
        raise MalformedResponse(f"Forecast response is not valid JSON: {e}") from e
    if not isinstance(document, dict):
        raise MalformedResponse(f"Forecast response must be a JSON object, got {type(document).__name__}")
    return document


def read_status(document: dict) -> int | None:
    """Return the response's "cod" value as an int, or None when absent.

    The provider sends the code as a string on success ("200") and as a number on errors.
    """
    if "cod" not in document:
        return None
    try:
        return _status_code.validate_python(document["cod"])
    except ValidationError as e:
        raise MalformedResponse(f"Unreadable status code: {document['cod']!r}") from e


def extract_location(document: dict) -> Location:
    """Read city.coord from the response."""
    try:
        return City.model_validate(document.get("city")).location()
    except ValidationError as e:
        raise MalformedResponse(f"Missing or malformed city coordinates: {e}") from e


def aggregate(
    raw_response: str | bytes,
    location_sink: LocationSink,
    *,
    clock: Callable[[], datetime] = utc_now,
    is_day_end: Callable[[str], bool] = is_last_slot_of_day,
) -> list[DailyAggregate] | None:
    """Collapse a multi-day 3-hour forecast into one record per day.

    Returns None when the response status is anything other than OK; callers should treat
    that as "no data available", not as a failure. The city coordinates are handed to
    ``location_sink`` before any slot is read.

    Output dates are fabricated from each flushing slot's array index (start of today plus
    ``index`` days). The slots' own dt_txt values only decide where a day ends.

    Raises:
        MalformedResponse: the body is not JSON, or a required field is missing or mistyped.
    """
    document = parse_response(raw_response)

    status = read_status(document)
    if status is not None and status != HTTPStatus.OK:
        if status == HTTPStatus.NOT_FOUND:
            logger.info("Forecast provider has no data for the requested location")
        else:
            logger.warning("Forecast provider returned status %d, skipping response", status)
        return None

    slots = document.get("list")
    if not isinstance(slots, list):
        raise MalformedResponse("Forecast response has no 'list' array")

    location_sink(extract_location(document))

    start_of_today = start_of_day_utc(clock())
    extremes = RunningExtremes()
    days: list[DailyAggregate] = []

    for i, raw_slot in enumerate(slots):
        date = start_of_today + DAY * i

        try:
            slot = RawForecastEntry.model_validate(raw_slot)
        except ValidationError as e:
            raise MalformedResponse(f"Malformed forecast slot at index {i}: {e}") from e

        extremes.update(slot.main.temp_max, slot.main.temp_min)

        if is_day_end(slot.dt_txt):
            days.append(
                DailyAggregate(
                    date=date,
                    humidity=slot.main.humidity,
                    pressure=slot.main.pressure,
                    wind_speed=slot.wind.speed,
                    wind_direction=slot.wind.deg,
                    max_temp=extremes.high,
                    min_temp=extremes.low,
                    weather_id=slot.condition.id,
                )
            )
            logger.debug("Flushed day at slot %d (%s): high=%s low=%s", i, slot.dt_txt, extremes.high, extremes.low)
            extremes.reset()

    return days
