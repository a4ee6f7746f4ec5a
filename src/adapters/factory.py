from src.config import Settings

from .ports import AvailabilityGateway, RatingsGateway


def create_ratings_gateway(settings: Settings, provider: str | None = None) -> RatingsGateway:
    """
    Factory: create the ratings adapter named by `provider`,
    falling back to settings.ratings_provider.
    """
    provider = provider or settings.ratings_provider

    if provider == "google":
        from .google_places_client import GooglePlacesClient

        return GooglePlacesClient(
            api_key=settings.google_places_api_key,
            timeout=settings.ratings_timeout_seconds,
        )

    if provider == "simulator":
        from .simulator_ratings import SimulatorRatingsGateway

        return SimulatorRatingsGateway()

    raise ValueError(f"Unknown ratings provider: {provider!r}")


def create_availability_gateway(
    settings: Settings, source: str | None = None
) -> AvailabilityGateway:
    """Factory: only the synthetic source exists until the PMS client lands."""
    source = source or settings.availability_source

    if source == "synthetic":
        from .synthetic_availability import SyntheticAvailabilityGateway

        return SyntheticAvailabilityGateway()

    raise ValueError(f"Unknown availability source: {source!r}")
