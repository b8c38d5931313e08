"""Demo — командная строка для прогона демонстраций.

Запуск:
    oop-cheatsheet all
    python -m src.demo.cli matrix --size 4
"""

from .cli import cli, main, run_matrix_demo, run_people_demo

__all__ = [
    "cli",
    "main",
    "run_matrix_demo",
    "run_people_demo",
]
