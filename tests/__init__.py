"""
Test suite for arith

Contains:
- tests/unit/          : Unit tests for individual modules
"""
