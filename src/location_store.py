# ABOUTME: Receiver for the coordinates extracted from a forecast response.
# ABOUTME: Defines the LocationSink callable type and a simple in-memory store implementing it.

from collections.abc import Callable

from src.models import Location

LocationSink = Callable[[Location], None]


class InMemoryLocationStore:
    """Keeps the most recently delivered forecast location.

    Instances are callable so they can be passed straight to ``aggregate``.
    """

    def __init__(self):
        self.coordinates: Location | None = None

    def __call__(self, location: Location) -> None:
        self.coordinates = location

    def is_available(self) -> bool:
        return self.coordinates is not None

    def reset(self) -> None:
        self.coordinates = None
