"""Bookstore catalog API."""
