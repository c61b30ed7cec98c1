"""Compiled-in catalog data."""
