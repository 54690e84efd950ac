"""Data layer - schemas and repository access."""
