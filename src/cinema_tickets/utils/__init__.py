"""Shared helpers: logging, error handling and input validation."""
