"""
Assemble everything a campground detail page needs from this layer.

Extracted so the page renderer and scripts share one code path.
"""

import logging
from datetime import date

from src.adapters.ports import AvailabilityGateway
from src.domain.content import ContentEntity
from src.domain.merge import CampgroundView, merge
from src.ratings_provider import RatingsProvider

log = logging.getLogger(__name__)


def build_campground_view(
    entity: ContentEntity,
    ratings: RatingsProvider,
    availability: AvailabilityGateway,
    check_in: date | None = None,
    check_out: date | None = None,
) -> CampgroundView:
    """
    1. Ratings, only when the editor linked a Google place.
    2. Availability for the entity's own accommodation labels
       (template site types when it has none).
    3. Merge both onto the entity.
    """
    view = CampgroundView(entity=entity)

    if entity.place_id:
        view = merge(view, ratings.fetch_ratings(entity.place_id))
    else:
        log.debug("campground=%s has no place id, skipping ratings", entity.codename)

    record = availability.get_availability(
        entity.codename,
        labels=list(entity.accommodation_labels),
        check_in=check_in,
        check_out=check_out,
    )
    return merge(view, record)
