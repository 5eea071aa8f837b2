"""Aggregation of line attribution results into contribution summaries."""
from __future__ import annotations

from authorship.aggregator import aggregate_file_results

__all__ = ["aggregate_file_results"]
