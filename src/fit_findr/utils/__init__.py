"""Parsing and rate-limiting helpers."""
