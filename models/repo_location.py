"""Repository location model."""
from __future__ import annotations

from dataclasses import field
from typing import Optional

from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class RepoLocation:
    """A validated repository location and the name derived from it.

    Equality and hashing only look at ``raw``. Two locations built from the
    same string compare equal even if they were resolved at different points
    of a run and ended up with different ``name`` values.

    Attributes:
        raw: The location string as supplied by the user
        name: Display name, never empty
        organization: Owning organization, only known for hosted git URLs
    """

    raw: str
    name: str = field(compare=False)
    organization: Optional[str] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError(f"Repository name for {self.raw} must not be empty")

    def __str__(self) -> str:
        return self.raw
