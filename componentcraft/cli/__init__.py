"""Command-line interface for componentcraft."""
