"""Shared helpers with no domain dependencies."""
