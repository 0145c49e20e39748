"""Command-line interface for docfix."""
