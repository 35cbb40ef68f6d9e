"""Shared reference data for the geoutm tests."""
