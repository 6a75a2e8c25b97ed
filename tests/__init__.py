"""
Test suite for recipe quantities

Contains:
- tests/unit/          : Unit tests for individual modules
"""
