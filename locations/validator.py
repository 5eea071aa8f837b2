"""Validation of raw repository location strings."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional
from urllib.parse import ParseResult, urlparse

from locations.config import DEFAULT_URL_SCHEMES
from locations.errors import InvalidLocationError

logger = logging.getLogger(__name__)

GIT_LINK_SUFFIX = ".git"

# jar: URLs name an entry inside an archive: jar:<url>!/<entry>
JAR_SCHEME = "jar"
JAR_SEPARATOR = "!/"


def parse_path(raw: str) -> Optional[Path]:
    """Interpret ``raw`` as a filesystem path.

    Returns:
        The path, or None if ``raw`` cannot name a path (empty or containing NUL)
    """
    if not raw or "\x00" in raw:
        return None
    return Path(raw)


def parse_url(
    raw: str, schemes: Iterable[str] = DEFAULT_URL_SCHEMES
) -> Optional[ParseResult]:
    """Interpret ``raw`` as a URL.

    Args:
        raw: The raw location string
        schemes: URL schemes to accept

    Returns:
        The parsed URL, or None if ``raw`` is not a well-formed URL with one of
        the accepted schemes
    """
    try:
        parsed = urlparse(raw)
    except ValueError:
        # urlparse rejects things like unbalanced IPv6 brackets
        return None

    scheme = parsed.scheme.lower()
    if scheme not in {s.lower() for s in schemes}:
        return None
    if scheme == JAR_SCHEME and JAR_SEPARATOR not in parsed.path:
        return None
    return parsed


def is_existing_path(raw: str) -> bool:
    """Return True if ``raw`` names a path that exists right now."""
    path = parse_path(raw)
    if path is None:
        return False
    try:
        return path.exists()
    except OSError:
        # e.g. name too long
        return False


def is_git_url(raw: str, schemes: Iterable[str] = DEFAULT_URL_SCHEMES) -> bool:
    """Return True if ``raw`` is a well-formed URL ending in ``.git``."""
    if parse_url(raw, schemes) is None:
        return False
    return raw.endswith(GIT_LINK_SUFFIX)


def validate_location(
    raw: str, schemes: Iterable[str] = DEFAULT_URL_SCHEMES
) -> None:
    """Check that ``raw`` is an existing path or a git URL.

    The path check hits the filesystem on every call, so the result for the
    same string can change between calls.

    Args:
        raw: The raw location string
        schemes: URL schemes to accept for the git URL branch

    Raises:
        InvalidLocationError: If ``raw`` is neither
    """
    if is_existing_path(raw):
        logger.debug(f"{raw} is an existing path")
        return
    if is_git_url(raw, schemes):
        logger.debug(f"{raw} is a git URL")
        return
    raise InvalidLocationError(raw)
