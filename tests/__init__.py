"""
Test suite for quiz

Contains:
- tests/unit/          : Unit tests for individual modules
"""
