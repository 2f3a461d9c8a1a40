"""Command line interface for the exercises."""
