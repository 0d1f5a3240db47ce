"""Helpers for testing code that consumes ticktest results."""
