"""Database engine, sessions and reference data."""
