"""Derivation of repository names and organizations from location strings."""
from __future__ import annotations

import logging
import re
from pathlib import PurePath
from typing import Optional, Pattern, Tuple

from locations.config import LocationSettings
from locations.errors import InvalidLocationError
from locations.registrar import NameRegistrar
from locations.validator import GIT_LINK_SUFFIX, validate_location
from models.repo_location import RepoLocation

logger = logging.getLogger(__name__)


def build_hosted_git_pattern(host: str = "github.com") -> Pattern[str]:
    """Compile the ``<anything><host>/<org>/<repo>.git`` pattern for ``host``."""
    return re.compile(
        rf"^.*{re.escape(host)}/(?P<organization>.+?)/(?P<name>.+?)\.git$"
    )


HOSTED_GIT_PATTERN = build_hosted_git_pattern()


def match_hosted_git(
    raw: str, pattern: Pattern[str] = HOSTED_GIT_PATTERN
) -> Optional[Tuple[str, str]]:
    """Return ``(organization, name)`` if ``raw`` is a hosted git URL, else None."""
    match = pattern.fullmatch(raw)
    if match is None:
        return None
    return match.group("organization"), match.group("name")


def fallback_name(raw: str) -> str:
    """Return the last path segment of ``raw`` without a trailing ``.git``.

    ``.`` and ``./`` are named ``.``. A segment that is exactly ``.git`` is
    kept whole so the name is never empty.

    Raises:
        InvalidLocationError: If ``raw`` has no segment at all, e.g. ``/``
    """
    name = PurePath(raw).name
    if not name:
        # PurePath drops "." segments
        segments = [segment for segment in raw.split("/") if segment]
        if not segments:
            raise InvalidLocationError(raw)
        name = segments[-1]

    if name.endswith(GIT_LINK_SUFFIX) and name != GIT_LINK_SUFFIX:
        name = name[: -len(GIT_LINK_SUFFIX)]
    return name


def resolve_name(
    raw: str,
    registrar: NameRegistrar,
    pattern: Pattern[str] = HOSTED_GIT_PATTERN,
) -> Tuple[str, Optional[str]]:
    """Work out the display name and organization for a validated location.

    Hosted git URLs give both directly and skip the registrar. Anything else
    is named after its last path segment, made unique through ``registrar``.

    Args:
        raw: A location string that already passed validation
        registrar: Registry of names handed out in this run
        pattern: Hosted git URL pattern

    Returns:
        Tuple of (name, organization); organization is None for the fallback

    Raises:
        InvalidLocationError: If the fallback name would be empty
    """
    hosted = match_hosted_git(raw, pattern)
    if hosted is not None:
        organization, name = hosted
        logger.debug(f"{raw} is hosted: organization={organization} name={name}")
        return name, organization

    name = registrar.register(fallback_name(raw))
    logger.debug(f"{raw} named {name} from its path")
    return name, None


def resolve_location(
    raw: str,
    registrar: NameRegistrar,
    settings: Optional[LocationSettings] = None,
) -> RepoLocation:
    """Validate ``raw`` and build its :class:`RepoLocation`.

    Args:
        raw: The location string as supplied by the user
        registrar: Registry of names handed out in this run
        settings: Location settings; read from the environment when omitted

    Returns:
        The resolved location

    Raises:
        InvalidLocationError: If ``raw`` is not a usable location
    """
    settings = settings or LocationSettings()
    validate_location(raw, settings.url_schemes)

    if settings.hosted_git_host == "github.com":
        pattern = HOSTED_GIT_PATTERN
    else:
        pattern = build_hosted_git_pattern(settings.hosted_git_host)

    name, organization = resolve_name(raw, registrar, pattern)
    return RepoLocation(raw=raw, name=name, organization=organization)
