"""Database engine, sessions and error helpers."""
