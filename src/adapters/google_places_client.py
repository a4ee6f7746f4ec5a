import logging

import requests

from .ports import RatingRecord, RatingsGateway
from src.domain.errors import UpstreamFailure

BASE_URL = "https://maps.googleapis.com/maps/api/place/details/json"
FIELDS = "rating,user_ratings_total,reviews"

log = logging.getLogger(__name__)


class GooglePlacesClient(RatingsGateway):
    """
    Adapter: Google Places "Place Details" over HTTP.

    One GET per call, no retries. `timeout` bounds that GET; a timeout is
    reported like any other upstream failure.
    """

    def __init__(
        self,
        api_key: str | None,
        timeout: float | None = 5.0,
        session: requests.Session | None = None,
    ):
        self._api_key = api_key
        self._timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

    def fetch_place_ratings(self, place_id: str) -> RatingRecord:
        if not self._api_key:
            raise UpstreamFailure("GOOGLE_PLACES_API_KEY is not set")

        try:
            resp = self.session.get(
                BASE_URL,
                params={"place_id": place_id, "fields": FIELDS, "key": self._api_key},
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise UpstreamFailure(f"Places request failed: {type(exc).__name__}") from exc

        if not resp.ok:
            raise UpstreamFailure(f"Places HTTP {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as exc:
            raise UpstreamFailure("Places response is not JSON") from exc

        status = data.get("status")
        if status not in ("OK", "ZERO_RESULTS"):
            detail = f"Places status {status}"
            if data.get("error_message"):
                detail += f": {data['error_message']}"
            raise UpstreamFailure(detail)

        result = data.get("result")
        if not result:
            raise UpstreamFailure("Places response has no result")

        log.debug(
            "place=%s rating=%s total=%s reviews=%d",
            place_id,
            result.get("rating"),
            result.get("user_ratings_total"),
            len(result.get("reviews") or []),
        )
        return RatingRecord.from_place_result(result)
