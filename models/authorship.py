"""Models for per-author line attribution and contribution counts."""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Author(BaseModel):
    """A contributor identified by their git id."""

    model_config = ConfigDict(frozen=True)

    git_id: str = Field(description="Git user name or email the author commits as")
    display_name: Optional[str] = Field(default=None, description="Name shown in reports")


class LineInfo(BaseModel):
    """A single attributed line of a file."""

    line_number: int = Field(ge=1, description="1-based line number")
    author: Author = Field(description="Author the line is attributed to")
    content: str = Field(default="", description="Line text")


class FileResult(BaseModel):
    """Attribution results for one file."""

    path: str = Field(description="File path relative to the repository root")
    file_type: str = Field(description="File type used to group contributions")
    lines: List[LineInfo] = Field(default_factory=list)


class AuthorshipSummary(BaseModel):
    """Line counts per author, broken down by file type."""

    author_file_type_counts: Dict[str, Dict[str, int]] = Field(default_factory=dict)
    author_totals: Dict[str, int] = Field(default_factory=dict)

    @classmethod
    def for_authors(
        cls, authors: Iterable[Author], file_types: Iterable[str]
    ) -> "AuthorshipSummary":
        """Create a summary with a zero count for every author and file type."""
        file_types = list(file_types)
        summary = cls()
        for author in authors:
            summary.author_file_type_counts[author.git_id] = {ft: 0 for ft in file_types}
            summary.author_totals[author.git_id] = 0
        return summary

    def add_author_contribution_count(self, author: Author, file_type: str) -> None:
        """Count one more line by ``author`` in a file of ``file_type``."""
        counts = self.author_file_type_counts.setdefault(author.git_id, {})
        counts[file_type] = counts.get(file_type, 0) + 1
        self.author_totals[author.git_id] = self.author_totals.get(author.git_id, 0) + 1
