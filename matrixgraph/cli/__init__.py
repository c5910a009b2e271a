"""Command-line interface for MatrixGraph."""
