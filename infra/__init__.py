"""Infrastructure helpers for the seller variant wizard."""
