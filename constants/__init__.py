"""Shared constants for the seller variant wizard."""
