"""
Test suite for the OOP cheatsheet

Contains:
- tests/unit/          : Unit tests for individual modules
"""
