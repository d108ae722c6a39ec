"""
Test suite for fractions-meow

Contains:
- tests/unit/          : Unit tests for individual modules and the demo driver
"""
