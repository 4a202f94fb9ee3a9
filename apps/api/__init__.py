"""API application."""
