"""
Test suite for merchant-guide

Contains:
- tests/unit/          : Unit tests for the numeral grammar, knowledge base and driver
"""
