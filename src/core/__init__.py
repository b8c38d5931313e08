"""
Core value types, domain models and contracts.

This module contains the building blocks of the OOP cheatsheet: the owned
matrix buffer, the people hierarchy and the snapshot contract.
"""
