"""Command line interface for swash."""
