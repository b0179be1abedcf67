"""
Test suite for the seasonal dues engine

Contains:
- tests/unit/          : Unit tests for individual modules and resolution scenarios
"""
