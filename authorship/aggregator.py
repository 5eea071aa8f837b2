"""Aggregates file attribution results into per-author contribution counts."""
from __future__ import annotations

import logging
from typing import Iterable, List

from models.authorship import Author, AuthorshipSummary, FileResult

logger = logging.getLogger(__name__)


def aggregate_file_results(
    file_results: List[FileResult],
    authors: List[Author],
    file_types: Iterable[str],
) -> AuthorshipSummary:
    """Count attributed lines per author and file type.

    Lines attributed to anyone outside ``authors`` are ignored.

    Args:
        file_results: Attribution results for each analyzed file
        authors: Authors to count contributions for
        file_types: File types to report, each starting at zero

    Returns:
        Summary of line counts per author and file type
    """
    summary = AuthorshipSummary.for_authors(authors, file_types)
    known = {author.git_id for author in authors}
    skipped = 0

    for file_result in file_results:
        for line in file_result.lines:
            if line.author.git_id not in known:
                skipped += 1
                continue
            summary.add_author_contribution_count(line.author, file_result.file_type)

    logger.debug(
        f"Aggregated {len(file_results)} files, skipped {skipped} lines by unknown authors"
    )
    return summary
