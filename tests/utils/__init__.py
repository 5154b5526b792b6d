"""Shared test helpers for the lionbind suite."""
