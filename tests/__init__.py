"""
Test suite for hexcell-core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
