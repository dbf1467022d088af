from __future__ import annotations

_NEW_YORK_SKYLINE = "https://media.istockphoto.com/id/1406960186/photo/the-skyline-of-new-york-city-united-states.jpg?s=1024x1024&w=is&k=20&c=m5cYGPJsDS6nTsxYucy6jlCj7flGliYw6Lf4Ftg0jQs="
_NEW_YORK_LANDMARKS = "https://media.istockphoto.com/id/525232662/photo/new-york-empire-state-building-and-statue-of-liberty.jpg?s=1024x1024&w=is&k=20&c=9DG3g3gB1-c01RKG-Iinsigts2CtEGAQE2HoXLOYOhM="
_SAN_FRANCISCO = "https://media.istockphoto.com/id/1136437406/photo/san-francisco-skyline-with-oakland-bay-bridge-at-sunset-california-usa.jpg?s=1024x1024&w=is&k=20&c=_UuntG09XSAMDFr7E2AVukaN6MWV5jLtnsbSorf-csA="
_CHICAGO = "https://media.istockphoto.com/id/1449046495/photo/chicago-river-and-cityscape.jpg?s=1024x1024&w=is&k=20&c=XyBkj-fVzvo0gbbt0Obf8qIhCpGofcC6bYbP2GSjk5g="
_CHARLESTON = "https://media.istockphoto.com/id/1924853613/photo/charleston-south-carolina-usa-historic-cityscape.jpg?s=1024x1024&w=is&k=20&c=I8bgWkG76H3S_3QYUqF556Aif78HVVuHZQ3ebyOGBqc="

DEFAULT_KEY = "default"

# Lookup is first match in declaration order, so a key must come before any
# shorter key it contains ("new york city" before "new york").
# Two-letter aliases that occur inside ordinary words ("ny" in "company",
# "la" in "delaware") are not declared.
ASSET_MAP: dict[str, str] = {
    # New York
    "new york city": _NEW_YORK_SKYLINE,
    "new york": _NEW_YORK_LANDMARKS,
    # California
    "san francisco": _SAN_FRANCISCO,
    "sf": _SAN_FRANCISCO,
    "los angeles": _SAN_FRANCISCO,
    "california": _SAN_FRANCISCO,
    # Delaware
    "delaware": _CHICAGO,
    # Chicago
    "chicago": _CHICAGO,
    # South Carolina
    "charleston": _CHARLESTON,
    "south carolina": _CHARLESTON,
    # USA
    "united states": _CHICAGO,
    "usa": _CHICAGO,
    DEFAULT_KEY: _CHICAGO,
}


def resolve_asset_url(
    variant_name: str | None = None,
    service_name: str | None = None,
    asset_map: dict[str, str] | None = None,
) -> str:
    """Return the image URL of the first location keyword found in the variant/service names."""
    mapping = asset_map if asset_map is not None else ASSET_MAP
    search_text = f"{variant_name or ''} {service_name or ''}".lower()

    for keyword, url in mapping.items():
        if keyword != DEFAULT_KEY and keyword in search_text:
            return url

    return mapping.get(DEFAULT_KEY) or ASSET_MAP[DEFAULT_KEY]
