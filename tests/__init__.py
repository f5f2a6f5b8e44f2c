"""
Test suite for floatmag

Contains:
- tests/unit/          : Unit tests for individual modules
"""
