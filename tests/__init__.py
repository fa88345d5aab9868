#!/usr/bin/env python3
"""
Test suite for NicheScout.

Everything runs offline: the AI data source is replaced by in-memory fakes
and persistence uses throwaway SQLite databases.

    # Run all tests
    python -m pytest tests/ -v

    # Using unittest
    python -m unittest discover tests -v
"""
