"""
Core domain models and mathematical primitives.

This module contains the rational-number value types and the canonicalization
routines they are built on. It has no dependencies on the demo layer.
"""
