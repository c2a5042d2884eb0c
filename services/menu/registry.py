"""
Resto registry.

Maps the resto names the assistant understands to the endpoint codes used by
the menu API. Several restos share the same menu and therefore the same code.
"""

from types import MappingProxyType
from typing import Mapping, Optional


RESTO_ENDPOINTS: Mapping[str, str] = MappingProxyType({
    "De Brug": "nl-debrug",
    "Sint-Jansvest": "nl-sintjansvest",
    "Coupure": "nl",
    "Dunant": "nl",
    "Heymans": "nl-heymans",
    "Merelbeke": "nl",
    "Sterre": "nl",
    "Kantienberg": "nl-kantienberg",
})


def resolve_endpoint(resto: Optional[str]) -> Optional[str]:
    """Endpoint code for a resto name, or None if the resto is unknown."""
    if not isinstance(resto, str):
        return None
    return RESTO_ENDPOINTS.get(resto)
