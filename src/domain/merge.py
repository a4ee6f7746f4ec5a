"""
Merge CMS content with operational data into one view model.

The rendering layer only ever sees CampgroundView. Whether ratings came from
the cache or the provider, or availability from the synthetic generator or a
future PMS client, is invisible past this point.
"""

from dataclasses import dataclass, replace

from src.adapters.ports import AvailabilityRecord, RatingRecord
from src.domain.content import ContentEntity


@dataclass(frozen=True)
class CampgroundView:
    entity: ContentEntity
    ratings: RatingRecord | None = None
    availability: AvailabilityRecord | None = None

    @property
    def show_ratings(self) -> bool:
        """An empty record is a normal state: the section is simply hidden."""
        return self.ratings is not None and not self.ratings.is_empty

    def to_dict(self) -> dict:
        return {
            "codename": self.entity.codename,
            "name": self.entity.name,
            "placeId": self.entity.place_id,
            "ratings": self.ratings.to_dict() if self.show_ratings else None,
            "availability": self.availability.to_dict() if self.availability else None,
        }


def merge(
    entity_view: ContentEntity | CampgroundView,
    operational_data: RatingRecord | AvailabilityRecord,
) -> CampgroundView:
    """Return a new view with operational_data in its slot. Inputs are not modified."""
    view = (
        entity_view
        if isinstance(entity_view, CampgroundView)
        else CampgroundView(entity=entity_view)
    )
    if isinstance(operational_data, RatingRecord):
        return replace(view, ratings=operational_data)
    if isinstance(operational_data, AvailabilityRecord):
        return replace(view, availability=operational_data)
    raise TypeError(f"Cannot merge {type(operational_data).__name__} into a campground view")
