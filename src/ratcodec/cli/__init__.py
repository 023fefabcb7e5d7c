"""Command-line interface for ratcodec."""
