"""Per-site configuration documents generated from relational site data."""

__version__ = "1.0.0"
