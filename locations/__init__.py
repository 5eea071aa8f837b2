"""Resolution of repository paths and git URLs into named locations."""
from __future__ import annotations

from locations.convert import convert_strings_to_locations
from locations.errors import InvalidLocationError
from locations.registrar import NameRegistrar
from locations.resolver import resolve_location, resolve_name
from locations.validator import validate_location

__all__ = [
    "convert_strings_to_locations",
    "InvalidLocationError",
    "NameRegistrar",
    "resolve_location",
    "resolve_name",
    "validate_location",
]
