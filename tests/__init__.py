"""
Test suite for superflow

Contains:
- tests/unit/          : Unit tests for individual modules
"""
