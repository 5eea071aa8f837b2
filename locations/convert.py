"""Conversion of configured location strings into repository locations."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from locations.config import LocationSettings
from locations.registrar import NameRegistrar
from locations.resolver import resolve_location
from models.repo_location import RepoLocation

logger = logging.getLogger(__name__)


def convert_strings_to_locations(
    locations: Optional[Sequence[str]],
    registrar: NameRegistrar,
    settings: Optional[LocationSettings] = None,
) -> Optional[List[RepoLocation]]:
    """Convert every string in ``locations`` into a :class:`RepoLocation`.

    Args:
        locations: Raw location strings, or None if none were configured
        registrar: Registry of names handed out in this run
        settings: Location settings; read from the environment when omitted

    Returns:
        Locations in input order, or None if ``locations`` is None

    Raises:
        InvalidLocationError: On the first invalid string; nothing is returned
    """
    if locations is None:
        return None

    settings = settings or LocationSettings()

    converted = [resolve_location(raw, registrar, settings) for raw in locations]
    logger.info(f"Resolved {len(converted)} repository locations")
    return converted
