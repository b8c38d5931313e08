"""
People — иерархия классов для демонстрации ООП-механик

Модуль содержит учебную иерархию:
- AbstractPerson: абстрактный интерфейс с introduce()
- Person: базовый класс с read-only ID и общим счётчиком population
- Student: владеет списком оценок и закрытой платой за обучение,
  копии получают независимый список
- Teacher: кафедра, закрытая зарплата и "дружественная" функция reveal_salary
- TeachingAssistant: множественное наследование Student + Teacher
  с единственным общим Person в MRO

ИНВАРИАНТЫ:
1. population = число созданных и ещё не финализированных Person
   (копии не учитываются)
2. Person.__init__ выполняется ровно один раз даже для TeachingAssistant
3. Копия Student никогда не разделяет список оценок с оригиналом
"""

import weakref
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import ClassVar, Iterable, Optional

from src.core.config import (
    DEFAULT_MARKS,
    DEFAULT_PERSON_AGE,
    DEFAULT_PERSON_NAME,
    TA_DEFAULT_MARKS,
    VOTING_AGE,
)
from src.core.logging_config import get_logger

logger = get_logger(__name__)


# =============================================================================
# VALIDATION
# =============================================================================


def _validate_non_negative(value: float, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def _validate_marks(marks: Iterable[int]) -> list[int]:
    result = list(marks)
    for mark in result:
        if isinstance(mark, bool) or not isinstance(mark, int):
            raise ValueError(f"marks must be ints, got {mark!r}")
    return result


def _forget_person(name: str) -> None:
    Person.population -= 1
    logger.debug("Person %s finalized, population=%d", name, Person.population)


# =============================================================================
# ABSTRACT INTERFACE
# =============================================================================


class AbstractPerson(ABC):
    """Интерфейс: каждый человек умеет представиться."""

    @abstractmethod
    def introduce(self) -> str:
        ...


# =============================================================================
# PERSON
# =============================================================================


class Person(AbstractPerson):
    """
    Базовый человек.

    person_id задаётся при создании и дальше доступен только на чтение.
    Счётчик population общий для всех экземпляров и подклассов:
    увеличивается в __init__, уменьшается при финализации объекта
    или явном retire().
    """

    population: ClassVar[int] = 0

    def __init__(
        self,
        age: int = DEFAULT_PERSON_AGE,
        name: str = DEFAULT_PERSON_NAME,
        person_id: int = 0,
    ):
        _validate_non_negative(age, "age")

        super().__init__()
        self._person_id = person_id
        self.age = age
        self.name = name

        Person.population += 1
        self._finalizer: Optional[weakref.finalize] = weakref.finalize(self, _forget_person, name)
        logger.debug("Person %s created, population=%d", name, Person.population)

    @property
    def person_id(self) -> int:
        return self._person_id

    @classmethod
    def get_population(cls) -> int:
        return Person.population

    def is_vote_eligible(self, has_ssn: bool) -> bool:
        """Голосовать может совершеннолетний с SSN."""
        return has_ssn and self.age >= VOTING_AGE

    def introduce(self) -> str:
        return f"Hi, I'm {self.name}, age {self.age}, ID {self.person_id}."

    def retire(self) -> None:
        """
        Явное завершение жизни объекта для population.

        Идемпотентно; у копий ничего не делает.
        """
        if self._finalizer is not None:
            self._finalizer()

    def __copy__(self) -> "Person":
        # Копия делит атрибуты, но не участвует в population
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone._finalizer = None
        return clone

    def __deepcopy__(self, memo: dict) -> "Person":
        clone = self.__copy__()
        memo[id(self)] = clone
        return clone

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, age={self.age}, person_id={self.person_id})"


# =============================================================================
# STUDENT
# =============================================================================


class Student(Person):
    """
    Студент с собственным списком оценок.

    copy.copy / copy.deepcopy дают независимый список оценок,
    assign_from копирует оценки поэлементно.
    """

    def __init__(self, *args, marks: Optional[Iterable[int]] = None, fees: float = 0.0, **kwargs):
        validated = _validate_marks(marks if marks is not None else DEFAULT_MARKS)
        _validate_non_negative(fees, "fees")
        super().__init__(*args, **kwargs)
        self.marks: list[int] = validated
        self._fees = float(fees)

    def set_fees(self, fees: float) -> None:
        _validate_non_negative(fees, "fees")
        self._fees = float(fees)

    def get_fees(self) -> float:
        return self._fees

    def get_info(self) -> str:
        """Строка учётной записи: ID, имя, возраст, плата за обучение."""
        return f"{self.person_id} {self.name} {self.age} {self._fees:.2f}"

    def __copy__(self) -> "Student":
        clone = super().__copy__()
        clone.marks = list(self.marks)
        return clone

    def assign_from(self, other: "Student") -> "Student":
        """Копирование оценок другого студента (имя и ID не меняются)."""
        if not isinstance(other, Student):
            raise TypeError(f"Cannot assign marks from {type(other).__name__}")
        if other is not self:
            self.marks[:] = other.marks
        return self

    def introduce(self) -> str:
        return f"I'm Student {self.name}, age {self.age}, ID {self.person_id}."


# =============================================================================
# TEACHER
# =============================================================================


class Teacher(Person):
    """Преподаватель кафедры dept с закрытой зарплатой."""

    def __init__(self, *args, salary: float = 0.0, dept: str = "", **kwargs):
        _validate_non_negative(salary, "salary")
        super().__init__(*args, **kwargs)
        self._salary = float(salary)
        self.dept = dept

    def set_salary(self, salary: float) -> None:
        _validate_non_negative(salary, "salary")
        self._salary = float(salary)

    def get_salary(self) -> float:
        return self._salary

    def get_info(self) -> str:
        return f"#{self.person_id}: {self.name} from {self.dept} dept, earns ${self._salary:.2f}/yr!"

    def introduce(self) -> str:
        return f"I'm Teacher {self.name}, teaching with salary ${self._salary:.2f}"


def reveal_salary(teacher: Teacher) -> str:
    """Friend-функция: читает закрытую зарплату напрямую."""
    return f"[Friend Function] Teacher {teacher.name}'s salary is ${teacher._salary:.2f}"


# =============================================================================
# TEACHING ASSISTANT
# =============================================================================


class TeachingAssistant(Student, Teacher):
    """
    Ассистент преподавателя: и студент, и преподаватель.

    MRO: TeachingAssistant → Student → Teacher → Person → AbstractPerson,
    поэтому Person инициализируется один раз.
    get_info() берётся у Student, первого в MRO.
    """

    def __init__(
        self,
        name: str,
        age: int,
        person_id: int,
        salary: float,
        marks: Optional[Iterable[int]] = None,
    ):
        super().__init__(
            age,
            name,
            person_id,
            marks=marks if marks is not None else TA_DEFAULT_MARKS,
            salary=salary,
        )

    def introduce(self) -> str:
        return (
            f"I'm TA {self.name}, ID {self.person_id}, "
            f"also assist teacher with salary ${self.get_salary():.2f}"
        )

    def show_teacher_salary(self) -> str:
        return f"[Friend Class] Teacher salary accessed by TA: ${self._salary:.2f}"


# =============================================================================
# FUNCTION-STATIC OBJECT
# =============================================================================


@lru_cache(maxsize=None)
def static_person() -> Person:
    """Единственный экземпляр, создаётся при первом вызове."""
    return Person(99, "StaticUser", 999)
