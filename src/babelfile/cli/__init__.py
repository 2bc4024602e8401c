"""Command line interface for babelfile."""
