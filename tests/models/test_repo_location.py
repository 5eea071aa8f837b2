"""Tests for the RepoLocation model."""
from __future__ import annotations

import dataclasses

import pytest

from locations.registrar import NameRegistrar
from locations.resolver import resolve_location
from models.repo_location import RepoLocation


def test_repo_location_creation() -> None:
    """Test creating a RepoLocation directly."""
    location = RepoLocation(
        raw="https://github.com/acme/widgets.git",
        name="widgets",
        organization="acme",
    )
    assert location.raw == "https://github.com/acme/widgets.git"
    assert location.name == "widgets"
    assert location.organization == "acme"
    assert str(location) == location.raw


def test_repo_location_organization_defaults_to_none() -> None:
    """Test that the organization is optional."""
    location = RepoLocation(raw="/tmp/widgets", name="widgets")
    assert location.organization is None


def test_repo_location_rejects_empty_name() -> None:
    """Test that a location always has a name."""
    with pytest.raises(ValueError):
        RepoLocation(raw="/", name="")


def test_repo_location_is_frozen() -> None:
    """Test that a location cannot change after construction."""
    location = RepoLocation(raw="/tmp/widgets", name="widgets")
    with pytest.raises(dataclasses.FrozenInstanceError):
        location.name = "gadgets"  # type: ignore[misc]


def test_equality_only_considers_raw() -> None:
    """Test that name and organization are ignored by equality and hashing."""
    first = RepoLocation(raw="/tmp/widgets", name="widgets")
    second = RepoLocation(raw="/tmp/widgets", name="widgets_3", organization="acme")
    other = RepoLocation(raw="/tmp/gadgets", name="widgets")

    assert first == second
    assert hash(first) == hash(second)
    assert first != other
    assert first != "/tmp/widgets"
    assert len({first, second, other}) == 2


def test_same_raw_resolved_twice_is_equal() -> None:
    """Test that re-resolving a location gives an equal entity with a new name."""
    registrar = NameRegistrar()
    raw = "https://example.com/x/widgets.git"

    first = resolve_location(raw, registrar)
    second = resolve_location(raw, registrar)

    assert first.name == "widgets"
    assert second.name == "widgets_1"
    assert first == second
    assert hash(first) == hash(second)
