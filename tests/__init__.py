"""
Test suite for capability-numerics

Contains:
- tests/unit/          : Unit tests for individual modules
"""
