# ABOUTME: Date helpers for fabricating per-day forecast timestamps.
# ABOUTME: Provides the default UTC clock, start-of-day normalization, and epoch-millis conversion.

from datetime import UTC, datetime, time, timedelta

DAY = timedelta(days=1)


def utc_now() -> datetime:
    """Default clock for the aggregator."""
    return datetime.now(UTC)


def start_of_day_utc(moment: datetime) -> datetime:
    """Return midnight UTC of the calendar date ``moment`` falls on.

    The date is read in ``moment``'s own timezone, so a clock reporting local time
    yields the local calendar day. Naive values are treated as UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return datetime.combine(moment.date(), time.min, tzinfo=UTC)


def to_epoch_millis(moment: datetime) -> int:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return (moment - datetime(1970, 1, 1, tzinfo=UTC)) // timedelta(milliseconds=1)
