from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date

MAX_REVIEWS = 5


@dataclass(frozen=True)
class Review:
    """One third-party review, already sanitized."""

    author_name: str
    text: str
    rating: float


@dataclass(frozen=True)
class RatingRecord:
    """Aggregate rating for a place plus up to MAX_REVIEWS reviews."""

    rating: float
    user_ratings_total: int
    reviews: tuple[Review, ...] = ()

    @classmethod
    def empty(cls) -> "RatingRecord":
        return cls(rating=0, user_ratings_total=0, reviews=())

    @classmethod
    def from_place_result(cls, result: dict) -> "RatingRecord":
        """
        Build a record from a Place Details "result" object.

        Missing numbers become 0, only the first MAX_REVIEWS reviews are kept
        (in provider order), and missing review fields get neutral defaults.
        """
        reviews = tuple(
            Review(
                author_name=r.get("author_name") or "Anonymous",
                text=r.get("text") or "",
                rating=r.get("rating") or 0,
            )
            for r in (result.get("reviews") or [])[:MAX_REVIEWS]
        )
        return cls(
            rating=result.get("rating") or 0,
            user_ratings_total=result.get("user_ratings_total") or 0,
            reviews=reviews,
        )

    @property
    def is_empty(self) -> bool:
        return self.user_ratings_total == 0

    def to_dict(self) -> dict:
        return {
            "rating": self.rating,
            "user_ratings_total": self.user_ratings_total,
            "reviews": [
                {"author_name": r.author_name, "text": r.text, "rating": r.rating}
                for r in self.reviews
            ],
        }


@dataclass(frozen=True)
class SiteType:
    """One bookable accommodation type at a campground."""

    name: str
    price: int  # whole currency units per night
    available: bool


@dataclass(frozen=True)
class AvailabilityRecord:
    """Availability for one stay. `available` is derived, never stored."""

    site_types: tuple[SiteType, ...]
    check_in: date
    check_out: date

    @property
    def available(self) -> bool:
        return any(s.available for s in self.site_types)

    def to_dict(self) -> dict:
        return {
            "available": self.available,
            "siteTypes": [
                {"name": s.name, "price": s.price, "available": s.available}
                for s in self.site_types
            ],
            "checkIn": self.check_in.isoformat(),
            "checkOut": self.check_out.isoformat(),
        }


class RatingsGateway(ABC):
    """
    Port: where third-party ratings come from.

    RatingsProvider depends ONLY on this interface. It doesn't know
    whether the data comes from Google Places or an in-memory simulator.
    Implementations make exactly one attempt per call and raise
    UpstreamFailure for anything other than a usable response.
    """

    @abstractmethod
    def fetch_place_ratings(self, place_id: str) -> RatingRecord:
        """Return the sanitized ratings for place_id or raise UpstreamFailure."""
        ...


class AvailabilityGateway(ABC):
    """
    Port: where booking availability comes from.

    Today only the synthetic generator exists. A real PMS client will
    implement the same method so callers never change.
    """

    @abstractmethod
    def get_availability(
        self,
        entity_id: str,
        labels: list[str] | None = None,
        check_in: date | None = None,
        check_out: date | None = None,
    ) -> AvailabilityRecord:
        """Return availability for entity_id over [check_in, check_out)."""
        ...
