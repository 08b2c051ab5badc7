"""
Test suite for Vortex Matrix

Contains:
- tests/unit/          : Unit tests for individual modules and the end-to-end engine
"""
