"""
Test suite for geomcore

Contains:
- tests/unit/          : Unit tests for individual modules
"""
