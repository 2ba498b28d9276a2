"""Application setup."""
