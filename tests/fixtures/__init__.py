"""Shared test fixtures and test doubles."""
