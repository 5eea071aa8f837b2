"""Data models for repository locations and authorship results."""
