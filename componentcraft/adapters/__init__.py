"""Adapters connecting componentcraft ports to concrete infrastructure."""
