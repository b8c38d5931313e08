"""
Тесты для иерархии People

Проверяет:
1. Конструкторы и значения по умолчанию
2. Счётчик population (создание, retire, финализация, копии)
3. Виртуальную диспетчеризацию introduce()
4. Глубокое копирование оценок Student
5. Закрытую зарплату и кафедру Teacher, friend-доступ
6. Плату за обучение Student и get_info()
7. Множественное наследование TeachingAssistant
"""

import copy
import gc

import pytest

from src.core.config import DEFAULT_MARKS, TA_DEFAULT_MARKS
from src.core.domain import (
    AbstractPerson,
    Person,
    Student,
    Teacher,
    TeachingAssistant,
    reveal_salary,
    static_person,
)


# =============================================================================
# PERSON
# =============================================================================


class TestPerson:
    """Тесты для Person"""

    def test_defaults(self) -> None:
        person = Person()
        assert person.age == 0
        assert person.name == "Default"
        assert person.person_id == 0
        person.retire()

    def test_parameterized(self) -> None:
        alice = Person(25, "Alice", 101)
        assert alice.introduce() == "Hi, I'm Alice, age 25, ID 101."
        alice.retire()

    def test_person_id_read_only(self) -> None:
        person = Person(30, "Eve", 7)
        with pytest.raises(AttributeError):
            person.person_id = 8
        person.retire()

    def test_negative_age_raises(self) -> None:
        with pytest.raises(ValueError, match="age must be non-negative"):
            Person(-1, "Nobody")

    @pytest.mark.parametrize(
        "age,has_ssn,expected",
        [(18, True, True), (17, True, False), (40, False, False), (0, False, False)],
    )
    def test_vote_eligibility(self, age: int, has_ssn: bool, expected: bool) -> None:
        person = Person(age, "Voter")
        assert person.is_vote_eligible(has_ssn) is expected
        person.retire()

    def test_abstract_interface(self) -> None:
        with pytest.raises(TypeError):
            AbstractPerson()
        assert isinstance(Person(), AbstractPerson)
        gc.collect()


# =============================================================================
# POPULATION
# =============================================================================


class TestPopulation:
    """Общий счётчик population"""

    def test_construction_increments(self) -> None:
        before = Person.get_population()
        first = Person(20, "A")
        second = Student(21, "B", 2)
        assert Person.get_population() == before + 2
        first.retire()
        second.retire()
        assert Person.get_population() == before

    def test_retire_idempotent(self) -> None:
        before = Person.get_population()
        person = Person(20, "A")
        person.retire()
        person.retire()
        assert Person.get_population() == before

    def test_finalization_decrements(self) -> None:
        before = Person.get_population()
        person = Person(20, "Temp")
        assert Person.get_population() == before + 1
        del person
        gc.collect()
        assert Person.get_population() == before

    def test_copies_not_counted(self) -> None:
        before = Person.get_population()
        alice = Person(25, "Alice", 101)
        alice_copy = copy.copy(alice)
        assert Person.get_population() == before + 1
        assert alice_copy.introduce() == alice.introduce()

        alice_copy.retire()
        assert Person.get_population() == before + 1
        alice.retire()
        assert Person.get_population() == before

    def test_teaching_assistant_counted_once(self) -> None:
        """Person в основе TA инициализируется один раз"""
        before = Person.get_population()
        ta = TeachingAssistant("Charlie", 23, 301, 35000)
        assert Person.get_population() == before + 1
        ta.retire()
        assert Person.get_population() == before

    def test_population_shared_by_subclasses(self) -> None:
        assert Student.get_population() == Person.get_population()
        assert Teacher.get_population() == Person.get_population()


# =============================================================================
# STUDENT
# =============================================================================


class TestStudent:
    """Тесты для Student"""

    @pytest.fixture
    def bob(self):
        student = Student(20, "Bob", 1, marks=(70, 80, 90))
        yield student
        student.retire()

    def test_default_marks(self) -> None:
        student = Student()
        assert student.marks == list(DEFAULT_MARKS)
        student.retire()

    def test_introduce(self, bob: Student) -> None:
        assert bob.introduce() == "I'm Student Bob, age 20, ID 1."

    def test_virtual_dispatch(self, bob: Student) -> None:
        """introduce() выбирается по фактическому типу"""
        people: list[Person] = [bob]
        assert people[0].introduce().startswith("I'm Student")

    @pytest.mark.parametrize("copier", [copy.copy, copy.deepcopy])
    def test_copy_has_independent_marks(self, bob: Student, copier) -> None:
        clone = copier(bob)
        clone.marks[0] = 85
        assert bob.marks == [70, 80, 90]
        assert clone.marks == [85, 80, 90]
        assert clone.name == "Bob"

    def test_assign_from_copies_marks(self, bob: Student) -> None:
        other = Student(22, "Dana", 2, marks=(1, 2, 3))
        bob.assign_from(other)
        assert bob.marks == [1, 2, 3]
        assert bob.name == "Bob"

        other.marks[0] = 100
        assert bob.marks[0] == 1
        other.retire()

    def test_self_assign(self, bob: Student) -> None:
        assert bob.assign_from(bob) is bob
        assert bob.marks == [70, 80, 90]

    def test_assign_from_non_student(self, bob: Student) -> None:
        with pytest.raises(TypeError):
            bob.assign_from([1, 2, 3])

    def test_invalid_marks(self) -> None:
        with pytest.raises(ValueError, match="marks must be ints"):
            Student(20, "Bad", 3, marks=(1, "two", 3))
        gc.collect()

    def test_fees_accessors(self, bob: Student) -> None:
        assert bob.get_fees() == 0.0
        bob.set_fees(1500.5)
        assert bob.get_fees() == 1500.5

    def test_negative_fees_rejected(self, bob: Student) -> None:
        bob.set_fees(100)
        with pytest.raises(ValueError, match="fees must be non-negative"):
            bob.set_fees(-1)
        assert bob.get_fees() == 100.0

    def test_negative_fees_at_construction_not_counted(self) -> None:
        """Отклонённый студент не попадает в population"""
        before = Person.get_population()
        with pytest.raises(ValueError, match="fees must be non-negative"):
            Student(20, "Bad", 4, fees=-5)
        gc.collect()
        assert Person.get_population() == before

    def test_get_info(self) -> None:
        student = Student(19, "Dana", 7, fees=2500)
        assert student.get_info() == "7 Dana 19 2500.00"
        student.retire()


# =============================================================================
# TEACHER
# =============================================================================


class TestTeacher:
    """Тесты для Teacher и friend-доступа"""

    @pytest.fixture
    def smith(self):
        teacher = Teacher(45, "Dr. Smith", 201, salary=70000)
        yield teacher
        teacher.retire()

    def test_salary_accessors(self, smith: Teacher) -> None:
        assert smith.get_salary() == 70000.0
        smith.set_salary(80000)
        assert smith.get_salary() == 80000.0

    def test_negative_salary_rejected(self, smith: Teacher) -> None:
        with pytest.raises(ValueError, match="salary must be non-negative"):
            smith.set_salary(-1)
        assert smith.get_salary() == 70000.0

    def test_introduce(self, smith: Teacher) -> None:
        assert smith.introduce() == "I'm Teacher Dr. Smith, teaching with salary $70000.00"

    def test_reveal_salary(self, smith: Teacher) -> None:
        assert reveal_salary(smith) == "[Friend Function] Teacher Dr. Smith's salary is $70000.00"

    def test_default_dept_is_empty(self, smith: Teacher) -> None:
        assert smith.dept == ""

    def test_get_info(self) -> None:
        teacher = Teacher(50, "Shradha", 7, salary=25000, dept="Computer Science")
        assert teacher.get_info() == "#7: Shradha from Computer Science dept, earns $25000.00/yr!"
        teacher.retire()


# =============================================================================
# TEACHING ASSISTANT
# =============================================================================


class TestTeachingAssistant:
    """Тесты для TeachingAssistant (множественное наследование)"""

    @pytest.fixture
    def charlie(self):
        ta = TeachingAssistant("Charlie", 23, 301, 35000)
        yield ta
        ta.retire()

    def test_mro_has_single_person(self) -> None:
        mro = TeachingAssistant.__mro__
        assert mro[:4] == (TeachingAssistant, Student, Teacher, Person)
        assert mro.count(Person) == 1

    def test_is_both_student_and_teacher(self, charlie: TeachingAssistant) -> None:
        assert isinstance(charlie, Student)
        assert isinstance(charlie, Teacher)

    def test_fields(self, charlie: TeachingAssistant) -> None:
        assert charlie.name == "Charlie"
        assert charlie.age == 23
        assert charlie.person_id == 301
        assert charlie.get_salary() == 35000.0
        assert charlie.marks == list(TA_DEFAULT_MARKS)

    def test_introduce(self, charlie: TeachingAssistant) -> None:
        assert charlie.introduce() == "I'm TA Charlie, ID 301, also assist teacher with salary $35000.00"

    def test_show_teacher_salary(self, charlie: TeachingAssistant) -> None:
        assert charlie.show_teacher_salary() == "[Friend Class] Teacher salary accessed by TA: $35000.00"

    def test_get_info_follows_student(self, charlie: TeachingAssistant) -> None:
        """get_info() разрешается через Student, первый в MRO"""
        assert charlie.get_info() == "301 Charlie 23 0.00"
        assert charlie.dept == ""

    def test_copy_keeps_salary_and_isolates_marks(self, charlie: TeachingAssistant) -> None:
        clone = copy.copy(charlie)
        clone.marks[2] = 0
        assert clone.get_salary() == 35000.0
        assert charlie.marks == list(TA_DEFAULT_MARKS)


# =============================================================================
# STATIC OBJECT
# =============================================================================


class TestStaticPerson:
    """Function-static объект"""

    def test_created_once(self) -> None:
        first = static_person()
        second = static_person()
        assert first is second
        assert first.introduce() == "Hi, I'm StaticUser, age 99, ID 999."
