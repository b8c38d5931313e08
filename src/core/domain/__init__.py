"""
Domain models and value objects.

Contains the matrix snapshot contract and the people hierarchy used by the demo.
"""

from src.core.domain.people import (
    AbstractPerson,
    Person,
    Student,
    Teacher,
    TeachingAssistant,
    reveal_salary,
    static_person,
)
from src.core.domain.snapshot import MatrixSnapshot

__all__ = [
    # Snapshot model
    "MatrixSnapshot",
    # People hierarchy
    "AbstractPerson",
    "Person",
    "Student",
    "Teacher",
    "TeachingAssistant",
    "reveal_salary",
    "static_person",
]
