"""Configuration, security and request authentication."""
