"""
In-memory RatingsGateway for tests and local development.
"""

from .ports import RatingRecord, RatingsGateway
from src.domain.errors import UpstreamFailure


class SimulatorRatingsGateway(RatingsGateway):
    """
    Fake ratings provider. No mocking framework needed.

    Test helpers:
        inject_place()   register a raw Place Details "result" object
        fail_with()      make every following call raise UpstreamFailure
        recover()        undo fail_with()
        calls            list of place ids requested, in order
    """

    def __init__(self):
        self._places: dict[str, dict] = {}
        self._failure: str | None = None
        self.calls: list[str] = []

    def inject_place(self, place_id: str, result: dict) -> None:
        """Test helper: the provider now knows place_id."""
        self._places[place_id] = result

    def fail_with(self, reason: str = "simulated outage") -> None:
        self._failure = reason

    def recover(self) -> None:
        self._failure = None

    def fetch_place_ratings(self, place_id: str) -> RatingRecord:
        self.calls.append(place_id)
        if self._failure:
            raise UpstreamFailure(self._failure)
        result = self._places.get(place_id)
        if result is None:
            raise UpstreamFailure(f"unknown place {place_id!r}")
        return RatingRecord.from_place_result(result)
