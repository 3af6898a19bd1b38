"""
Test suite for the decimal rounding harness

Contains:
- tests/unit/          : Unit tests for individual modules and the CLI
"""
