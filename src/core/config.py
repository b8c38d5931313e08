"""
Configuration — константы OOP cheatsheet

Все константы собраны в одном месте, чтобы демо и тесты опирались
на одни и те же значения по умолчанию.
"""

from typing import Final

# =============================================================================
# OWNED MATRIX
# =============================================================================

# Значение, которым заполняются ячейки новой матрицы
DEFAULT_FILL: Final[int] = 0

# Разделитель ячеек в текстовом дампе
DEFAULT_SEPARATOR: Final[str] = " "

# Текстовое представление пустой матрицы (size == 0)
EMPTY_RENDER: Final[str] = "<empty>"


# =============================================================================
# PEOPLE DEMO
# =============================================================================

# Минимальный возраст для голосования
VOTING_AGE: Final[int] = 18

# Оценки студента по умолчанию (три предмета)
DEFAULT_MARKS: Final[tuple[int, int, int]] = (0, 0, 0)

# Оценки ассистента преподавателя по умолчанию
TA_DEFAULT_MARKS: Final[tuple[int, int, int]] = (90, 95, 100)

# Имя и возраст "пустого" человека
DEFAULT_PERSON_NAME: Final[str] = "Default"
DEFAULT_PERSON_AGE: Final[int] = 0


# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL_ENV: Final[str] = "OOP_CHEATSHEET_LOG_LEVEL"
LOG_FORMAT_ENV: Final[str] = "OOP_CHEATSHEET_LOG_FORMAT"
LOG_DATEFMT_ENV: Final[str] = "OOP_CHEATSHEET_LOG_DATEFMT"

DEFAULT_LOG_LEVEL: Final[str] = "WARNING"
DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DEFAULT_LOG_DATEFMT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Уровни, принимаемые флагом --log-level
LOG_LEVEL_CHOICES: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
