"""Thin HTTP adapters around the purchase service."""
