"""Command line interface for cutstock."""
