"""
The slice of a content-management campground item this layer needs.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ContentEntity:
    """A campground as published by the CMS."""

    codename: str                 # stable item key, also the synthesis seed
    name: str
    place_id: str | None = None   # Google Place ID, if the editor set one
    accommodation_labels: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_delivery_item(cls, item: dict) -> "ContentEntity":
        """
        Parse a delivery-API item:
            {"system": {"codename": ...},
             "elements": {"name": {"value": ...},
                          "google_place_id": {"value": ...},
                          "ways_to_stay": {"value": [{"name": ...}, ...]}}}
        Missing elements are treated as empty.
        """
        system = item.get("system") or {}
        elements = item.get("elements") or {}

        def value(element: str):
            return (elements.get(element) or {}).get("value")

        labels = []
        for way in value("ways_to_stay") or []:
            # Linked items carry a name; plain text lists are just strings.
            label = way.get("name") if isinstance(way, dict) else way
            if label:
                labels.append(str(label))

        return cls(
            codename=system.get("codename") or "",
            name=value("name") or system.get("name") or "",
            place_id=(value("google_place_id") or "").strip() or None,
            accommodation_labels=tuple(labels),
        )
