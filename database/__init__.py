"""Persistence for NicheScout settings."""
