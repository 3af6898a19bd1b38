"""
Core domain models, rounding algorithms, and contracts.

This module contains the foundational building blocks that are independent
of the command-line harness (argument parsing, timing, reporting).
"""
