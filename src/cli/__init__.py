"""Command-line interface for hexconv."""
